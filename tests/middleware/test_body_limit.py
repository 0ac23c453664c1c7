from fastapi import status

from file_service.config import settings
from tests.constants import URLs


def test_request_over_body_limit_returns_413(client, monkeypatch):
    """Declared body size above the limit is rejected before reading."""
    monkeypatch.setattr(settings, "MAX_REQUEST_BODY_SIZE_MB", 0)

    response = client.post(URLs.UPLOAD, files={"file": ("report.pdf", b"data", "application/pdf")})

    assert response.status_code == 413
    assert response.json() == {
        "success": False,
        "error": "Payload Too Large",
        "message": "Request body exceeds 0MB limit",
    }


def test_request_under_body_limit_passes(client):
    """Requests within the limit reach the endpoint."""
    response = client.post(URLs.UPLOAD, files={"file": ("report.pdf", b"data", "application/pdf")})

    assert response.status_code == status.HTTP_200_OK


def test_invalid_content_length_returns_400(client):
    """Non-numeric Content-Length is rejected before reading."""
    response = client.post(URLs.UPLOAD, content=b"data", headers={"Content-Length": "abc"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "success": False,
        "error": "Bad Request",
        "message": "Invalid Content-Length header",
    }
