import io

import pytest

from hawker_menu.graphs.menu_extraction import MenuExtractionError

JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 128


@pytest.fixture
def fake_extraction(monkeypatch):
    calls = []

    def fake(image_bytes, mime_type, model=None, max_bytes=None):
        calls.append({"mime_type": mime_type, "model": model, "size": len(image_bytes)})
        return [{"name": "Chicken Rice", "price": 3.5}]

    monkeypatch.setattr("hawker_menu.routes.extract.run_menu_extraction", fake)
    return calls


def _upload(client, data, filename="menu.jpg", content_type="image/jpeg", **form):
    form["image"] = (io.BytesIO(data), filename, content_type)
    return client.post("/api/extract", data=form, content_type="multipart/form-data")


def test_extract_returns_items(client, fake_extraction):
    resp = _upload(client, JPEG_BYTES)

    assert resp.status_code == 200
    assert resp.get_json() == {"items": [{"name": "Chicken Rice", "price": 3.5}]}
    assert fake_extraction[0]["mime_type"] == "image/jpeg"
    assert fake_extraction[0]["model"] == client.application.config["MENU_VISION_MODEL"]


def test_extract_normalises_image_jpg(client, fake_extraction):
    resp = _upload(client, JPEG_BYTES, content_type="image/jpg", model="gemini-override")

    assert resp.status_code == 200
    assert fake_extraction[0] == {"mime_type": "image/jpeg", "model": "gemini-override", "size": len(JPEG_BYTES)}


def test_extract_requires_multipart(client, fake_extraction):
    resp = client.post("/api/extract", json={"image": "base64..."})

    assert resp.status_code == 400
    assert "multipart/form-data" in resp.get_json()["error"]
    assert fake_extraction == []


def test_extract_requires_image_field(client, fake_extraction):
    resp = client.post("/api/extract", data={"note": "no photo"}, content_type="multipart/form-data")

    assert resp.status_code == 400
    assert "Missing image" in resp.get_json()["error"]


def test_extract_rejects_unsupported_type(client, fake_extraction):
    resp = _upload(client, b"GIF89a" + b"\x00" * 16, filename="menu.gif", content_type="image/gif")

    assert resp.status_code == 400
    assert "PNG or JPEG" in resp.get_json()["error"]
    assert fake_extraction == []


def test_extract_rejects_oversize_image(client, fake_extraction):
    too_big = b"\x00" * (client.application.config["MAX_IMAGE_BYTES"] + 1)
    resp = _upload(client, too_big)

    assert resp.status_code == 413
    assert fake_extraction == []


def test_extract_failure_returns_500_with_details(client, monkeypatch):
    def boom(*args, **kwargs):
        raise MenuExtractionError("extraction_failed: quota exceeded")

    monkeypatch.setattr("hawker_menu.routes.extract.run_menu_extraction", boom)
    resp = _upload(client, JPEG_BYTES)

    assert resp.status_code == 500
    data = resp.get_json()
    assert data["error"] == "Unexpected server error"
    assert "quota exceeded" in data["details"]["message"]


def test_extract_failure_hides_details_in_production(client, monkeypatch):
    def boom(*args, **kwargs):
        raise MenuExtractionError("extraction_failed: quota exceeded")

    monkeypatch.setattr("hawker_menu.routes.extract.run_menu_extraction", boom)
    client.application.config["IS_PRODUCTION"] = True
    resp = _upload(client, JPEG_BYTES)

    assert resp.status_code == 500
    assert resp.get_json()["details"] is None
