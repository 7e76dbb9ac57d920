import pytest
import pytesseract
from fastapi.testclient import TestClient

from docintake.main import app
from docintake.routers.dependencies import get_document_processor

from helpers import make_png


@pytest.fixture
def client(processor):
    app.dependency_overrides[get_document_processor] = lambda: processor
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_process_text_file(client, file_client):
    file_client.files["documents/file_1.txt"] = b"hello world"

    response = client.post(
        "/api/v1/extraction/process",
        json={"file_path": "documents/file_1.txt", "file_name": "hello.txt"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "text"
    assert body["fileName"] == "hello.txt"
    assert body["text"] == "hello world"
    assert body["metadata"]["wordCount"] == 2
    assert body["metadata"]["encoding"] == "utf-8"
    assert "extractedAt" in body["metadata"]


def test_unsupported_file_type_maps_to_415(client, file_client):
    file_client.files["documents/file_2.exe"] = b"MZ"

    response = client.post(
        "/api/v1/extraction/process",
        json={"file_path": "documents/file_2.exe", "file_name": "setup.exe"},
    )

    assert response.status_code == 415
    assert response.json()["error"] == "Unsupported file type: .exe"
    assert file_client.calls == ["documents/file_2.exe"]


def test_download_failure_maps_to_502(client):
    response = client.post(
        "/api/v1/extraction/process",
        json={"file_path": "documents/missing.pdf", "file_name": "missing.pdf"},
    )

    assert response.status_code == 502
    assert response.json()["error"] == "Failed to download file from Telegram"


def test_corrupt_pdf_maps_to_422(client, file_client):
    file_client.files["documents/bad.pdf"] = b"garbage"

    response = client.post(
        "/api/v1/extraction/process",
        json={"file_path": "documents/bad.pdf", "file_name": "bad.pdf"},
    )

    assert response.status_code == 422
    assert response.json()["error"] == "Failed to process PDF file"


def test_missing_fields_rejected(client):
    response = client.post("/api/v1/extraction/process", json={"file_path": "x"})
    assert response.status_code == 422


def test_telegram_image(client, file_client, monkeypatch):
    monkeypatch.setattr(pytesseract, "image_to_string", lambda image, lang=None: "photo caption")
    file_client.files["photos/file_5.jpg"] = make_png()

    response = client.post("/api/v1/extraction/telegram-image", json={"file_path": "photos/file_5.jpg"})

    assert response.status_code == 200
    body = response.json()
    assert body["fileName"] == "telegram_image.jpg"
    assert body["metadata"]["source"] == "telegram"


def test_supported_types(client):
    response = client.get("/api/v1/extraction/supported-types")
    assert response.status_code == 200
    assert response.json()["types"]["image"] == [".jpeg", ".jpg", ".png", ".tiff", ".webp"]


@pytest.mark.parametrize("file_name, supported, category", [
    ("Report.PDF", True, "pdf"),
    ("notes.csv", True, "text"),
    ("movie.mp4", False, None),
])
def test_supported_check(client, file_name, supported, category):
    response = client.get("/api/v1/extraction/supported", params={"file_name": file_name})
    assert response.status_code == 200
    assert response.json() == {"file_name": file_name, "supported": supported, "category": category}


def test_health_and_request_id(client):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.status_code == 200
    assert response.json()["bot_token_configured"] is True
    assert response.headers["X-Request-ID"] == "req-123"


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "/api/v1/extraction" in response.json()["routers"]
