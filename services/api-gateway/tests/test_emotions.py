"""
Emotion route tests
"""

from app.config import settings

from upstream_fakes import RAG_HOST


class TestCreateEmotion:
    def test_create_is_public(self, client, upstream):
        upstream.add("POST", RAG_HOST, "/emotions", status_code=201, json_body={"id": "em1"})

        response = client.post(
            "/api/emotions",
            json={"emotion": "joy", "intensity": 7, "notes": "sunny", "user_id": "u1"},
        )

        assert response.status_code == 201
        assert response.json() == {"id": "em1"}
        request = upstream.calls_to(RAG_HOST, "/emotions")[0]
        assert request.url.params["user_id"] == "u1"
        assert upstream.last_json(RAG_HOST, "/emotions") == {"emotion": "joy", "intensity": 7, "notes": "sunny"}

    def test_required_fields(self, client, upstream):
        response = client.post("/api/emotions", json={"emotion": "joy", "user_id": "u1"})

        assert response.status_code == 400
        assert response.json() == {"error": "Emotion, intensity, and user_id are required"}
        assert upstream.calls == []

    def test_numeric_user_id(self, client, upstream):
        upstream.add("POST", RAG_HOST, "/emotions", status_code=201, json_body={"id": "em2"})

        response = client.post("/api/emotions", json={"emotion": "calm", "intensity": 3, "user_id": 42})

        assert response.status_code == 201
        assert upstream.calls_to(RAG_HOST, "/emotions")[0].url.params["user_id"] == "42"
        assert upstream.last_json(RAG_HOST, "/emotions") == {"emotion": "calm", "intensity": 3, "notes": None}

    def test_upstream_status_passed_through(self, client, upstream):
        upstream.add("POST", RAG_HOST, "/emotions", status_code=422, json_body={"detail": "intensity out of range"})

        response = client.post("/api/emotions", json={"emotion": "joy", "intensity": 70, "user_id": "u1"})

        assert response.status_code == 422
        assert response.json() == {"detail": "intensity out of range"}

    def test_upstream_unreachable(self, client):
        response = client.post("/api/emotions", json={"emotion": "joy", "intensity": 3, "user_id": "u1"})

        assert response.status_code == 502
        assert response.json() == {"error": "Failed to create emotion entry"}


class TestQueryEmotions:
    def test_list_default_limit(self, client, upstream):
        upstream.add("GET", RAG_HOST, "/emotions", json_body=[{"emotion": "joy"}])

        response = client.get("/api/emotions", params={"user_id": "u1"})

        assert response.status_code == 200
        assert upstream.calls_to(RAG_HOST, "/emotions")[0].url.params["limit"] == "100"

    def test_list_requires_user(self, client, upstream):
        response = client.get("/api/emotions")

        assert response.status_code == 400
        assert response.json() == {"error": "user_id is required"}
        assert upstream.calls == []

    def test_stats_default_days(self, client, upstream):
        upstream.add("GET", RAG_HOST, "/emotions/stats", json_body={"joy": 3})

        response = client.get("/api/emotions/stats", params={"user_id": "u1"})

        assert response.json() == {"joy": 3}
        assert upstream.calls_to(RAG_HOST, "/emotions/stats")[0].url.params["days"] == "30"

    def test_by_type_requires_both(self, client, upstream):
        response = client.get("/api/emotions/by-type", params={"user_id": "u1"})

        assert response.status_code == 400
        assert response.json() == {"error": "user_id and emotion_type are required"}
        assert upstream.calls == []

    def test_by_type(self, client, upstream):
        upstream.add("GET", RAG_HOST, "/emotions/by-type", json_body=[])

        response = client.get("/api/emotions/by-type", params={"user_id": "u1", "emotion_type": "anger"})

        assert response.status_code == 200
        assert upstream.calls_to(RAG_HOST, "/emotions/by-type")[0].url.params["emotion_type"] == "anger"


class TestEmotionsRequireAuth:
    def test_gate_enabled(self, client, upstream, monkeypatch):
        monkeypatch.setattr(settings, "emotions_require_auth", True)

        response = client.get("/api/emotions", params={"user_id": "u1"})

        assert response.status_code == 401
        assert upstream.calls == []

    def test_gate_enabled_with_token(self, client, upstream, auth_headers, monkeypatch):
        monkeypatch.setattr(settings, "emotions_require_auth", True)
        upstream.add("GET", RAG_HOST, "/emotions", json_body=[])

        response = client.get("/api/emotions", params={"user_id": "u1"}, headers=auth_headers)

        assert response.status_code == 200
