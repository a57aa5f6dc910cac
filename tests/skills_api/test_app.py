"""Tests for the application shell: index, health and error rendering."""

from skills_api.main import app
from skills_api.services.skill_service import SkillService


class TestIndex:
    """Tests for GET /."""

    def test_index_lists_routes(self, client):
        """The index describes every theme and skill route."""
        response = client.get("/")
        assert response.status_code == 200
        body = response.json()
        assert "message" in body
        for entity in ("themes", "skills"):
            routes = body["endpoints"][entity]
            assert set(routes) == {"getAll", "getOne", "create", "update", "delete"}
            assert routes["getAll"] == f"GET /{entity}"
            assert routes["delete"] == f"DELETE /{entity}/:id"

    def test_health(self, client):
        """Health endpoint reports healthy."""
        assert client.get("/health").json() == {"status": "healthy"}


class TestRouting:
    """Tests for the registered route table."""

    def test_crud_routes_registered(self):
        """Every method/path pair of the API is mounted."""
        registered = {
            (method, route.path)
            for route in app.routes
            for method in getattr(route, "methods", set())
        }
        for entity in ("themes", "skills"):
            param = "{theme_id}" if entity == "themes" else "{skill_id}"
            assert ("GET", f"/{entity}") in registered
            assert ("POST", f"/{entity}") in registered
            assert ("GET", f"/{entity}/{param}") in registered
            assert ("PUT", f"/{entity}/{param}") in registered
            assert ("DELETE", f"/{entity}/{param}") in registered

    def test_cors_headers(self, client):
        """Cross-origin requests from the board's page are allowed."""
        response = client.get("/themes", headers={"Origin": "http://localhost:5500"})
        assert response.headers.get("access-control-allow-origin") in (
            "*",
            "http://localhost:5500",
        )

    def test_missing_body_is_400(self, client):
        """A POST without a body reports a 400 error body."""
        response = client.post("/skills")
        assert response.status_code == 400
        assert "error" in response.json()


class TestUnexpectedErrors:
    """Tests for failures the services do not classify."""

    def test_unclassified_error_keeps_error_body(self, lenient_client, monkeypatch):
        """A non-store exception still renders as 500 with {"error": ...}."""

        def explode(self):
            raise OverflowError("Python int too large to convert to SQLite INTEGER")

        monkeypatch.setattr(SkillService, "list_skills", explode)
        response = lenient_client.get("/skills")
        assert response.status_code == 500
        assert response.json() == {
            "error": "Python int too large to convert to SQLite INTEGER"
        }

    def test_classified_errors_unaffected(self, lenient_client):
        """The catch-all does not swallow 404s."""
        response = lenient_client.get("/skills/1")
        assert response.status_code == 404
        assert response.json() == {"error": "Skill not found"}
