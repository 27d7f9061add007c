"""Request helpers for end-to-end tests."""


def register(client, username="ab_user", email="a@b.com", password="secret1"):
    """Register a user and return the response body."""
    response = client.post(
        "/api/users/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201
    return response.json()


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
