"""
Menu Extraction Graph Module

LangGraph workflow that turns a menu photo into a cleaned list of
{name, price} items: input validation, Gemini vision extraction, and
output cleaning.
"""

from .menu_extraction_graph import build_menu_extraction_graph, run_menu_extraction, MenuExtractionError
from .state.menu_extraction_state import MenuExtractionState

__all__ = [
    "build_menu_extraction_graph",
    "run_menu_extraction",
    "MenuExtractionError",
    "MenuExtractionState"
]
