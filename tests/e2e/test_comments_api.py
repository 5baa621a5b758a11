"""End-to-end tests for comment, tag and health endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from blog.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


@pytest.fixture
def post_id(client):
    """Id of a freshly created post."""
    response = client.post(
        "/api/posts", json={"title": "Post", "text": "Body", "tags": ["java"]}
    )
    return response.json()["id"]


class TestCommentEndpoints:
    """End-to-end tests for comments under a post."""

    def test_comment_lifecycle(self, client, post_id):
        """Create, read, edit and delete a comment; the counter follows."""
        # Create
        created = client.post(
            f"/api/posts/{post_id}/comments", json={"postId": post_id, "text": "Hi"}
        )
        assert created.status_code == 201
        comment = created.json()
        assert comment["postId"] == post_id
        assert client.get(f"/api/posts/{post_id}").json()["commentsCount"] == 1

        # Read
        listed = client.get(f"/api/posts/{post_id}/comments")
        assert [c["id"] for c in listed.json()] == [comment["id"]]
        fetched = client.get(f"/api/posts/{post_id}/comments/{comment['id']}")
        assert fetched.json()["text"] == "Hi"

        # Edit
        edited = client.put(
            f"/api/posts/{post_id}/comments/{comment['id']}",
            json={"id": comment["id"], "postId": post_id, "text": "Hello"},
        )
        assert edited.status_code == 200
        assert edited.json()["text"] == "Hello"

        # Delete
        deleted = client.delete(f"/api/posts/{post_id}/comments/{comment['id']}")
        assert deleted.status_code == 204
        assert client.get(f"/api/posts/{post_id}").json()["commentsCount"] == 0

    def test_comment_text_is_stored_as_sent(self, client, post_id):
        """Leading and trailing whitespace survive a round trip."""
        text = "  quoted\n"

        created = client.post(
            f"/api/posts/{post_id}/comments", json={"postId": post_id, "text": text}
        )
        fetched = client.get(f"/api/posts/{post_id}/comments/{created.json()['id']}")

        assert fetched.json()["text"] == text

    def test_blank_comment_is_rejected(self, client, post_id):
        """Whitespace-only comments fail request validation."""
        response = client.post(
            f"/api/posts/{post_id}/comments", json={"postId": post_id, "text": " \n"}
        )

        assert response.status_code == 422

    def test_comment_on_unknown_post(self, client):
        """Commenting on an unknown post returns 404."""
        response = client.post(f"/api/posts/{uuid4()}/comments", json={"text": "Hi"})

        assert response.status_code == 404

    def test_mismatched_post_id(self, client, post_id):
        """A body postId different from the path is a bad request."""
        response = client.post(
            f"/api/posts/{post_id}/comments",
            json={"postId": str(uuid4()), "text": "Hi"},
        )

        assert response.status_code == 400

    def test_list_comments_of_unknown_post(self, client):
        """Listing comments of an unknown post returns 404."""
        response = client.get(f"/api/posts/{uuid4()}/comments")

        assert response.status_code == 404


class TestTagAndHealthEndpoints:
    """End-to-end tests for /tags and /health."""

    def test_list_tags(self, client, post_id):
        """Known tags are listed by name."""
        response = client.get("/tags")

        assert response.status_code == 200
        assert [t["name"] for t in response.json()["tags"]] == ["java"]

    def test_health(self, client):
        """Health check reports healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
