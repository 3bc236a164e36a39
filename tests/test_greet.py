# =============================================================================
# tests/test_greet.py - Greeting Tests
# =============================================================================
# Tests for GreetingService and POST /api/greet.
#
# Run with: poetry run pytest tests/test_greet.py -v
# =============================================================================

import pytest

from app.exceptions import NameRequiredError
from core.models.greeting import GreetRequest
from core.services.greeting_service import GreetingService


# =============================================================================
# GreetingService Tests
# =============================================================================

class TestGreetingService:
    """Tests for GreetingService."""

    @pytest.mark.parametrize("name", [None, "", " ", "   ", "\t\n", "\u3000", "\u00a0"])
    def test_blank_names(self, name):
        """Test names that count as missing."""
        assert GreetingService.is_blank(name)

        with pytest.raises(NameRequiredError) as exc_info:
            GreetingService.greet(GreetRequest(name=name))

        assert exc_info.value.status_code == 400
        assert exc_info.value.to_dict() == {"error": "Name is required"}

    @pytest.mark.parametrize("name", ["\x1c", "\x1d", "\x1e", "\x1f", " \x1f "])
    def test_information_separators_are_not_blank(self, name):
        """Test that U+001C..U+001F count as name characters, not whitespace."""
        assert not GreetingService.is_blank(name)

        assert GreetingService.greet(GreetRequest(name=name)).message == f"Hello, {name}!"

    def test_name_is_not_trimmed(self):
        """Test that surrounding whitespace is echoed unchanged."""
        response = GreetingService.greet(GreetRequest(name="  Ann "))

        assert response.message == "Hello,   Ann !"


# =============================================================================
# Endpoint Tests
# =============================================================================

class TestGreetEndpoint:
    """Tests for POST /api/greet."""

    def test_valid_name_returns_success(self, client):
        """Test a simple successful request."""
        response = client.post("/api/greet", json={"name": "John"})

        assert response.status_code == 200

    @pytest.mark.parametrize(
        "name",
        ["John", "Alice", "Bob", "A", "VeryLongNameWithManyCharactersHere"],
    )
    def test_various_valid_names(self, client, name):
        """Test that the greeting has the expected format."""
        response = client.post("/api/greet", json={"name": name})

        assert response.status_code == 200
        assert response.json() == {"message": f"Hello, {name}!"}

    def test_unicode_name_echoed_verbatim(self, client):
        """Test that non-ASCII characters survive the round trip."""
        response = client.post("/api/greet", json={"name": "José María"})

        assert response.status_code == 200
        assert response.json()["message"] == "Hello, José María!"

    @pytest.mark.parametrize("body", [{"name": ""}, {"name": "   "}, {}, {"name": None}])
    def test_missing_or_blank_name_returns_bad_request(self, client, body):
        """Test that absent, null, empty and whitespace names are rejected."""
        response = client.post("/api/greet", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Name is required"}

    def test_content_type_is_json(self, client):
        """Test the content type for success and failure."""
        ok = client.post("/api/greet", json={"name": "Test"})
        bad = client.post("/api/greet", json={"name": ""})

        assert "application/json" in ok.headers["content-type"]
        assert "application/json" in bad.headers["content-type"]

    def test_malformed_json_returns_bad_request(self, client):
        """Test that an unparseable body is a client error."""
        response = client.post(
            "/api/greet",
            content=b'{"name": ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"

    def test_non_string_name_returns_bad_request(self, client):
        """Test that a wrongly typed name is a client error."""
        response = client.post("/api/greet", json={"name": 123})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"

    @pytest.mark.parametrize("name", ["\x1c", "\x1d", "\x1e", "\x1f", " \x1f "])
    def test_information_separators_are_echoed(self, client, name):
        """Test that control separators are not treated as whitespace."""
        response = client.post("/api/greet", json={"name": name})

        assert response.status_code == 200
        assert response.json() == {"message": f"Hello, {name}!"}

    def test_get_is_not_allowed(self, client):
        """Test that the route only accepts POST."""
        response = client.get("/api/greet")

        assert response.status_code == 405
