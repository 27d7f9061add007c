"""Unit tests for row/document mappers."""

from uuid import UUID

from scribe.persistence.mappers import post_to_dict, row_to_post
from tests.factories import make_comment, make_post, make_user


class TestPostMapping:
    def test_embedded_documents_are_json_values(self):
        """Comments and likes are stored as plain JSON on the post row."""
        # Arrange
        author = make_user()
        post = make_post(
            author.id, comments=[make_comment(author.id)], likes=[author.id]
        )

        # Act
        row = post_to_dict(post)

        # Assert
        assert row["likes"] == [str(author.id)]
        assert row["comments"][0]["author_id"] == str(author.id)
        assert isinstance(row["comments"][0]["created_at"], str)

    def test_row_with_string_ids_maps_back(self):
        author = make_user()
        post = make_post(author.id, comments=[make_comment(author.id)])

        restored = row_to_post(post_to_dict(post))

        assert restored == post
        assert isinstance(restored.comments[0].author_id, UUID)
