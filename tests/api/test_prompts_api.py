"""API tests for the prompt templating routes."""

import pytest
from fastapi.testclient import TestClient

from promptdoc.core.config import Settings
from promptdoc.main import create_app


WELCOME_BLOCKS = [
    {"id": "b1", "type": "text", "position": 0, "content": {"text": "Hello {{name}}, welcome to {{name}}'s workspace."}},
    {"id": "b2", "type": "code", "position": 1, "content": {"text": "{{ignored}}", "language": "text"}},
    {"id": "b3", "type": "prompt", "position": 2, "content": {"text": "Write about {{topic}}."}},
]


@pytest.fixture
def client():
    """Create a test client with a small block limit."""
    app = create_app(Settings(max_blocks=5))
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# Health Tests
# =============================================================================


def test_health(client):
    """Test the health check endpoint."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


# =============================================================================
# Variables Endpoint Tests
# =============================================================================


class TestVariablesEndpoint:
    """Test suite for POST /prompts/variables."""

    def test_extract(self, client):
        """Test variables are returned in first-discovery order."""
        response = client.post("/prompts/variables", json={"blocks": WELCOME_BLOCKS})

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 2
        assert [v["name"] for v in body["variables"]] == ["name", "topic"]
        assert body["variables"][0]["description"] == "Variable: name"

    def test_empty_document(self, client):
        """Test that an empty document has no variables."""
        response = client.post("/prompts/variables", json={"blocks": []})

        assert response.status_code == 200
        assert response.json() == {"variables": [], "count": 0}

    def test_malformed_content(self, client):
        """Test that null or non-mapping block content is treated as empty."""
        blocks = [
            {"id": "1", "type": "text", "content": None},
            {"id": "2", "type": "text", "content": "oops"},
            {"id": "3", "type": "text", "content": {"text": "{{a}}"}},
        ]

        response = client.post("/prompts/variables", json={"blocks": blocks})

        assert response.status_code == 200
        assert [v["name"] for v in response.json()["variables"]] == ["a"]

    def test_invalid_block_type(self, client):
        """Test that unknown block types are a validation error."""
        response = client.post(
            "/prompts/variables",
            json={"blocks": [{"id": "1", "type": "video", "content": {}}]},
        )

        assert response.status_code == 422
        assert response.json()["detail"] == "Validation error"

    def test_too_many_blocks(self, client):
        """Test that documents over the block limit are rejected."""
        blocks = [{"id": str(i), "type": "text", "text": "x"} for i in range(6)]

        response = client.post("/prompts/variables", json={"blocks": blocks})

        assert response.status_code == 413
        body = response.json()
        assert body["error_code"] == "DOCUMENT_TOO_LARGE"
        assert body["extra"] == {"block_count": 6, "max_blocks": 5}


# =============================================================================
# Render Endpoint Tests
# =============================================================================


class TestRenderEndpoint:
    """Test suite for POST /prompts/render."""

    def test_render_partial(self, client):
        """Test bracketed fallback and the completion indicator."""
        response = client.post(
            "/prompts/render",
            json={"blocks": WELCOME_BLOCKS, "values": {"name": "Ana"}},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["text"] == (
            "Hello Ana, welcome to Ana's workspace.\n\nWrite about [topic]."
        )
        assert body["policy"] == "bracketed"
        assert body["completion"] == {"filled": 1, "total": 2, "all_filled": False}
        assert body["copy_ready"] is False

    def test_render_unchanged_policy(self, client):
        """Test selecting the unchanged fallback per request."""
        response = client.post(
            "/prompts/render",
            json={"blocks": WELCOME_BLOCKS, "values": {"topic": "  "}, "policy": "unchanged"},
        )

        body = response.json()
        assert body["text"] == (
            "Hello {{name}}, welcome to {{name}}'s workspace.\n\nWrite about {{topic}}."
        )
        assert body["completion"]["filled"] == 0

    def test_render_complete(self, client):
        """Test that a fully filled document is ready to copy."""
        response = client.post(
            "/prompts/render",
            json={"blocks": WELCOME_BLOCKS, "values": {"name": "Ana", "topic": "AI"}},
        )

        body = response.json()
        assert body["copy_ready"] is True
        assert body["completion"] == {"filled": 2, "total": 2, "all_filled": True}

    def test_render_without_variables(self, client):
        """Test that documents without variables are always ready."""
        response = client.post(
            "/prompts/render",
            json={"blocks": [{"id": "1", "type": "text", "text": "Plain prompt."}]},
        )

        body = response.json()
        assert body["text"] == "Plain prompt."
        assert body["copy_ready"] is True

    def test_invalid_policy(self, client):
        """Test that unknown policies are a validation error."""
        response = client.post(
            "/prompts/render",
            json={"blocks": WELCOME_BLOCKS, "policy": "loud"},
        )

        assert response.status_code == 422


# =============================================================================
# Preview Endpoint Tests
# =============================================================================


class TestPreviewEndpoint:
    """Test suite for POST /prompts/preview."""

    def test_preview_segments(self, client):
        """Test annotated segments and their emphasis."""
        response = client.post(
            "/prompts/preview",
            json={
                "blocks": [{"id": "1", "type": "text", "text": "Hi {{name}}, on {{topic}}"}],
                "values": {"name": "Ana"},
                "policy": "unchanged",
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert [(s["text"], s["kind"], s["emphasized"]) for s in body["segments"]] == [
            ("Hi ", "literal", False),
            ("Ana", "value", True),
            (", on ", "literal", False),
            ("{{topic}}", "placeholder", False),
        ]
        assert body["text"] == "Hi Ana, on {{topic}}"
        assert body["completion"]["filled"] == 1

    def test_preview_matches_render(self, client):
        """Test that preview text equals the rendered prompt."""
        payload = {"blocks": WELCOME_BLOCKS, "values": {"topic": "AI"}}

        preview = client.post("/prompts/preview", json=payload).json()
        rendered = client.post("/prompts/render", json=payload).json()

        assert preview["text"] == rendered["text"]
        assert any(s["kind"] == "break" for s in preview["segments"])


# =============================================================================
# Sample Values Endpoint Tests
# =============================================================================


class TestSampleValuesEndpoint:
    """Test suite for POST /prompts/sample-values."""

    def test_sample_values(self, client):
        """Test that every variable gets a deterministic sample."""
        payload = {"blocks": WELCOME_BLOCKS + [{"id": "b4", "type": "text", "position": 3, "text": "{{xyz123}}"}]}

        first = client.post("/prompts/sample-values", json=payload).json()
        second = client.post("/prompts/sample-values", json=payload).json()

        assert first["values"] == {
            "name": "Alex",
            "topic": "artificial intelligence",
            "xyz123": "sample xyz123",
        }
        assert first == second
