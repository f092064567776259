from .gemini_menu import gemini_extract_menu

__all__ = ["gemini_extract_menu"]
