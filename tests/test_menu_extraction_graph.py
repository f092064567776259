import pytest

import hawker_menu.graphs.menu_extraction.nodes.extraction_node as extraction_node
from hawker_menu.graphs.menu_extraction import MenuExtractionError, run_menu_extraction

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def _fake_gemini(payload, calls=None):
    def fake(model, image_bytes, mime_type, project=None, location=None):
        if calls is not None:
            calls.append({"model": model, "mime_type": mime_type, "size": len(image_bytes)})
        return payload
    return fake


def test_extraction_cleans_model_output(monkeypatch):
    calls = []
    monkeypatch.setattr(extraction_node, "gemini_extract_menu", _fake_gemini({
        "items": [
            {"name": "  Chicken Rice ", "price": 3.5},
            {"name": "Fish Soup", "price": "5.00"},
            {"name": "Seafood Hor Fun", "price": None},
            {"name": "Chilli Crab", "price": "MP"},
            {"name": "", "price": 4},
            {"name": "Refund", "price": -1},
            {"name": None, "price": 2},
        ]
    }, calls))

    items = run_menu_extraction(PNG_BYTES, "image/png", model="gemini-test")

    assert items == [
        {"name": "Chicken Rice", "price": 3.5},
        {"name": "Fish Soup", "price": 5.0},
    ]
    assert calls == [{"model": "gemini-test", "mime_type": "image/png", "size": len(PNG_BYTES)}]


def test_extraction_with_no_items(monkeypatch):
    monkeypatch.setattr(extraction_node, "gemini_extract_menu", _fake_gemini({"items": []}))
    assert run_menu_extraction(PNG_BYTES, "image/jpeg") == []


def test_model_failure_raises(monkeypatch):
    monkeypatch.setattr(extraction_node, "gemini_extract_menu",
                        _fake_gemini({"error": "extraction_failed", "raw": "sorry"}))

    with pytest.raises(MenuExtractionError, match="extraction_failed"):
        run_menu_extraction(PNG_BYTES, "image/png")


def test_malformed_payload_raises(monkeypatch):
    monkeypatch.setattr(extraction_node, "gemini_extract_menu", _fake_gemini({"items": "chicken rice 3.50"}))

    with pytest.raises(MenuExtractionError, match="output_validation_failed"):
        run_menu_extraction(PNG_BYTES, "image/png")


@pytest.mark.parametrize(
    "image_bytes, mime_type",
    [
        (b"", "image/png"),
        (PNG_BYTES, "image/gif"),
        (b"\x00" * 33, "image/png"),
    ],
)
def test_invalid_image_never_reaches_model(monkeypatch, image_bytes, mime_type):
    calls = []
    monkeypatch.setattr(extraction_node, "gemini_extract_menu", _fake_gemini({"items": []}, calls))

    with pytest.raises(MenuExtractionError, match="validation_failed"):
        run_menu_extraction(image_bytes, mime_type, max_bytes=32)
    assert calls == []
