from .gemini_client import make_client, extract_text_from_response, first_json_block, image_bytes_to_part, menu_items_schema

__all__ = ["make_client", "extract_text_from_response", "first_json_block", "image_bytes_to_part", "menu_items_schema"]
