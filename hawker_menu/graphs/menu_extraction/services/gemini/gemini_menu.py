# gemini_menu.py
from typing import Dict
from google.genai import types
from hawker_menu.services.shared.gemini.gemini_client import (
    make_client, image_bytes_to_part, extract_text_from_response, first_json_block, menu_items_schema
)
from hawker_menu.prompts.menu.extraction_prompt import build_extraction_prompt

def gemini_extract_menu(model: str, image_bytes: bytes, mime_type: str,
                        project: str = None, location: str = None) -> Dict:
    """
    Read {name, price} pairs off a menu photo.
    Returns {"items": [...]} as produced by the model, or {"error": ..., "raw": ...}.
    """
    client = make_client(project, location)
    parts = [types.Part.from_text(text=build_extraction_prompt()), image_bytes_to_part(image_bytes, mime_type)]
    contents = [types.Content(role="user", parts=parts)]

    # Attempt 1: plain, free-form JSON
    cfg1 = types.GenerateContentConfig(
        temperature=0.0,
        max_output_tokens=2048,
    )
    resp1 = client.models.generate_content(model=model, contents=contents, config=cfg1)
    raw1 = extract_text_from_response(resp1) or getattr(resp1, "text", "")
    data = first_json_block(raw1)

    # Attempt 2: structured JSON with schema
    if "items" not in data:
        cfg2 = types.GenerateContentConfig(
            temperature=0.0,
            response_mime_type="application/json",
            response_schema=menu_items_schema(),
            max_output_tokens=4096,
        )
        resp2 = client.models.generate_content(model=model, contents=contents, config=cfg2)
        raw2 = extract_text_from_response(resp2) or getattr(resp2, "text", "")
        data = first_json_block(raw2)

        if "items" not in data:
            return {"error": "extraction_failed", "raw": raw1 or raw2}

    return data
