"""End-to-end tests for posts, comments and likes."""

from uuid import uuid4

import pytest

from tests.e2e.helpers import auth_header, register

POST = {
    "title": "My first post",
    "content": "Content that is long enough",
    "tags": ["intro", "meta"],
}


@pytest.fixture
def author(client):
    return register(client, username="author", email="author@example.com")


@pytest.fixture
def reader(client):
    return register(client, username="reader", email="reader@example.com")


def create_post(client, token, payload=POST):
    response = client.post("/api/posts", json=payload, headers=auth_header(token))
    assert response.status_code == 201
    return response.json()


class TestCreatePost:
    """Tests for POST /api/posts."""

    def test_create_post(self, client, author):
        response = client.post(
            "/api/posts", json=POST, headers=auth_header(author["token"])
        )

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == "My first post"
        assert data["author"] == {"id": author["user"]["id"], "username": "author"}
        assert data["tags"] == ["intro", "meta"]
        assert data["comments"] == []
        assert data["likes"] == []
        assert "createdAt" in data and "updatedAt" in data

    def test_create_post_without_token(self, client):
        response = client.post("/api/posts", json=POST)

        assert response.status_code == 401

    def test_create_post_with_short_title(self, client, author):
        response = client.post(
            "/api/posts",
            json={**POST, "title": "abc"},
            headers=auth_header(author["token"]),
        )

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert [e["field"] for e in errors] == ["title"]


class TestReadPosts:
    """Tests for GET /api/posts and GET /api/posts/{id}."""

    def test_list_posts(self, client, author):
        for i in range(3):
            create_post(client, author["token"], {**POST, "title": f"Post number {i}"})

        response = client.get("/api/posts", params={"page": 1, "limit": 2})

        assert response.status_code == 200
        data = response.json()
        assert data["currentPage"] == 1
        assert data["totalPages"] == 2
        assert data["totalPosts"] == 3
        assert len(data["posts"]) == 2

    def test_get_post(self, client, author):
        post = create_post(client, author["token"])

        response = client.get(f"/api/posts/{post['id']}")

        assert response.status_code == 200
        assert response.json()["id"] == post["id"]

    def test_get_missing_post(self, client):
        response = client.get(f"/api/posts/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"message": "Post not found"}

    def test_get_post_with_malformed_id(self, client):
        response = client.get("/api/posts/123")

        assert response.status_code == 400
        assert response.json()["errors"][0]["message"] == "Invalid ID format"


class TestUpdateAndDelete:
    """Ownership-guarded mutations."""

    def test_owner_updates_post(self, client, author):
        post = create_post(client, author["token"])

        response = client.put(
            f"/api/posts/{post['id']}",
            json={"title": "Edited title", "content": "Edited content body"},
            headers=auth_header(author["token"]),
        )

        assert response.status_code == 200
        assert response.json()["title"] == "Edited title"
        assert response.json()["tags"] == ["intro", "meta"]

    def test_non_owner_cannot_update(self, client, author, reader):
        post = create_post(client, author["token"])

        response = client.put(
            f"/api/posts/{post['id']}",
            json={"title": "Hijacked title", "content": "Hijacked content body"},
            headers=auth_header(reader["token"]),
        )

        assert response.status_code == 403
        assert response.json() == {"message": "Not authorized to update this post"}
        assert client.get(f"/api/posts/{post['id']}").json()["title"] == POST["title"]

    def test_update_missing_post(self, client, author):
        response = client.put(
            f"/api/posts/{uuid4()}", json=POST, headers=auth_header(author["token"])
        )

        assert response.status_code == 404

    def test_non_owner_cannot_delete(self, client, author, reader):
        post = create_post(client, author["token"])

        response = client.delete(
            f"/api/posts/{post['id']}", headers=auth_header(reader["token"])
        )

        assert response.status_code == 403
        assert client.get(f"/api/posts/{post['id']}").status_code == 200

    def test_owner_deletes_post(self, client, author):
        post = create_post(client, author["token"])

        response = client.delete(
            f"/api/posts/{post['id']}", headers=auth_header(author["token"])
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Post removed"}
        assert client.get(f"/api/posts/{post['id']}").status_code == 404


class TestCommentsAndLikes:
    """Open to any authenticated user."""

    def test_comments_are_newest_first(self, client, author, reader):
        post = create_post(client, author["token"])
        url = f"/api/posts/{post['id']}/comments"

        client.post(url, json={"text": "First!"}, headers=auth_header(author["token"]))
        response = client.post(
            url, json={"text": "Second"}, headers=auth_header(reader["token"])
        )

        assert response.status_code == 200
        comments = response.json()
        assert [c["text"] for c in comments] == ["Second", "First!"]
        assert comments[0]["user"]["username"] == "reader"

    def test_comment_requires_token(self, client, author):
        post = create_post(client, author["token"])

        response = client.post(
            f"/api/posts/{post['id']}/comments", json={"text": "anonymous"}
        )

        assert response.status_code == 401

    def test_like_toggles(self, client, author, reader):
        post = create_post(client, author["token"])
        url = f"/api/posts/{post['id']}/like"

        liked = client.post(url, headers=auth_header(reader["token"]))
        unliked = client.post(url, headers=auth_header(reader["token"]))

        assert liked.status_code == 200
        assert liked.json()["likes"] == [reader["user"]["id"]]
        assert unliked.json()["likes"] == []
