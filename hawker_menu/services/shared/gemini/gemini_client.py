# gemini_client.py
import os, json, re
from typing import Dict, Optional
from google import genai
from google.genai import types
import base64

def make_client(project: Optional[str] = None, location: Optional[str] = None) -> genai.Client:
    api_key = os.getenv("GOOGLE_API_KEY")

    # API key first; Vertex AI only when a project is configured
    if api_key:
        return genai.Client(api_key=api_key)

    if project:
        try:
            return genai.Client(vertexai=True, project=project, location=location or "global")
        except Exception as e:
            raise RuntimeError(f"Failed to initialize Vertex AI client: {e}")

    raise RuntimeError("Provide GOOGLE_API_KEY for API key authentication or GOOGLE_CLOUD_PROJECT for Vertex AI.")

def image_bytes_to_part(data: bytes, mime_type: str) -> types.Part:
    return types.Part.from_bytes(data=data, mime_type=mime_type)

def extract_text_from_response(resp) -> str:
    """Return JSON/text from parts; also decode inline_data if needed."""
    try:
        for cand in (getattr(resp, "candidates", []) or []):
            content = getattr(cand, "content", None)
            if not content: continue
            for part in (getattr(content, "parts", []) or []):
                t = getattr(part, "text", None)
                if isinstance(t, str) and t.strip():
                    return t
                inline = getattr(part, "inline_data", None)
                if inline:
                    data = getattr(inline, "data", None)
                    if isinstance(data, (bytes, bytearray)):
                        return data.decode("utf-8", "ignore")
                    if isinstance(data, str):
                        try:
                            return base64.b64decode(data).decode("utf-8", "ignore")
                        except Exception:
                            return data
        top = getattr(resp, "text", None)
        return top if isinstance(top, str) else ""
    except Exception:
        return ""

def first_json_block(text) -> Dict:
    """Accept dict/str/bytes/None. Return {} on failure."""
    if isinstance(text, dict):
        return text
    if isinstance(text, (bytes, bytearray)):
        try: text = text.decode("utf-8", "ignore")
        except Exception: return {}
    if not isinstance(text, str) or not text.strip():
        return {}
    # Models sometimes wrap JSON in ``` fences despite instructions
    text = re.sub(r"^```(?:json)?\s*|\s*```$", "", text.strip())
    try:
        data = json.loads(text)
        return data if isinstance(data, dict) else {}
    except Exception:
        m = re.search(r"\{.*\}", text, flags=re.S)
        if m:
            try: return json.loads(m.group(0))
            except Exception: pass
        return {}

def menu_items_schema() -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "items": types.Schema(
                type=types.Type.ARRAY,
                items=types.Schema(
                    type=types.Type.OBJECT,
                    properties={
                        "name": types.Schema(type=types.Type.STRING),
                        "price": types.Schema(type=types.Type.NUMBER, nullable=True),
                    },
                    required=["name", "price"],
                ),
            ),
        },
        required=["items"]
    )
