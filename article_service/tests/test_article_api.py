# test_article_api.py

"""
API tests for the article endpoints, health check and root route.
"""

from datetime import datetime

import pytest


def create(client, title, content):
    return client.post("/api/articles", json={"title": title, "content": content})


class TestHealthAndRoot:
    def test_health_check(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["message"] == "Cybersecurity API is running"
        # Timestamp must be ISO-8601
        datetime.fromisoformat(body["timestamp"])

    def test_root_lists_endpoints(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["endpoints"] == {
            "health": "/api/health",
            "articles": "/api/articles",
        }


class TestCreateArticle:
    def test_create_valid_article(self, client):
        response = create(client, "Password hygiene", "Use a password manager.")

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Article created successfully"
        assert body["data"]["title"] == "Password hygiene"
        assert body["data"]["content"] == "Use a password manager."
        assert body["data"]["id"]
        assert body["data"]["date"]

    def test_fields_are_trimmed(self, client):
        response = create(client, "  Firewalls  ", "\n Block by default. \t")

        assert response.status_code == 201
        assert response.json()["data"]["title"] == "Firewalls"
        assert response.json()["data"]["content"] == "Block by default."

    @pytest.mark.parametrize(
        "payload",
        [
            {"title": "", "content": "Body"},
            {"title": "Title", "content": ""},
            {"title": "   ", "content": "Body"},
            {"title": "Title", "content": " \n "},
            {"content": "Body"},
            {"title": "Title"},
            {"title": None, "content": "Body"},
            {},
        ],
    )
    def test_missing_or_empty_fields_rejected(self, client, repository, payload):
        response = client.post("/api/articles", json=payload)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Title and content are required",
        }
        assert repository.documents == []

    def test_title_longer_than_200_rejected(self, client, repository):
        response = create(client, "T" * 201, "Body")

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert "200" in response.json()["message"]
        assert repository.documents == []

    def test_title_of_exactly_200_accepted(self, client):
        response = create(client, "T" * 200, "Body")

        assert response.status_code == 201

    def test_non_string_field_rejected(self, client):
        response = client.post("/api/articles", json={"title": 42, "content": "Body"})

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_malformed_json_rejected(self, client):
        response = client.post(
            "/api/articles",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_persistence_error_returns_500(self, failing_client):
        response = create(failing_client, "Title", "Body")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Server error while creating article",
        }


class TestListArticles:
    def test_empty_list(self, client):
        response = client.get("/api/articles")

        assert response.status_code == 200
        assert response.json() == {"success": True, "count": 0, "data": []}

    def test_new_article_appears_first(self, client):
        create(client, "First", "Older article")
        create(client, "Second", "Newer article")

        body = client.get("/api/articles").json()

        assert [a["title"] for a in body["data"]] == ["Second", "First"]

    def test_count_matches_stored_documents(self, client, repository):
        for i in range(3):
            create(client, f"Article {i}", "Body")

        body = client.get("/api/articles").json()

        assert body["count"] == len(repository.documents) == 3
        assert len(body["data"]) == 3

    def test_long_content_is_returned_in_full(self, client):
        create(client, "Phishing 101", "A" * 250)

        body = client.get("/api/articles").json()

        assert body["count"] == 1
        assert len(body["data"][0]["content"]) == 250

    def test_persistence_error_returns_500(self, failing_client):
        response = failing_client.get("/api/articles")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Server error while fetching articles",
        }

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json()["success"] is False
