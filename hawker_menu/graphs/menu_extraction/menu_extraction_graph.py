import time
from typing import Any, Dict, List

from langgraph.graph import StateGraph, END

from hawker_menu.config.settings import Config
from .state.menu_extraction_state import MenuExtractionState
from .nodes.validation_node import validate_input
from .nodes.extraction_node import extract_items
from .nodes.output_validation_node import clean_items
from hawker_menu.utils.timing import calculate_ms, print_pipeline_summary

class MenuExtractionError(Exception):
    """Raised when the extraction workflow ends with an error in its state"""

def build_menu_extraction_graph():
    """
    Build the menu extraction graph with three main nodes:
    1. validate - Checks image presence, type and size
    2. extract - Reads {name, price} pairs with Gemini vision
    3. clean - Validates the payload and drops unusable items

    Returns:
        Compiled LangGraph workflow
    """
    workflow = StateGraph(MenuExtractionState)

    workflow.add_node("validate", validate_input)
    workflow.add_node("extract", extract_items)
    workflow.add_node("clean", clean_items)

    workflow.set_entry_point("validate")
    workflow.add_edge("validate", "extract")
    workflow.add_edge("extract", "clean")
    workflow.add_edge("clean", END)

    return workflow.compile()

def run_menu_extraction(image_bytes: bytes, mime_type: str, model: str = None,
                        max_bytes: int = None) -> List[Dict[str, Any]]:
    """
    Run the menu extraction workflow on one image.

    Args:
        image_bytes: Raw PNG/JPEG bytes
        mime_type: Normalized MIME type of the image
        model: Gemini model name (defaults to Config.MENU_VISION_MODEL)
        max_bytes: Upper bound on image size (defaults to Config.MAX_IMAGE_BYTES)

    Returns:
        Cleaned items: [{"name": str, "price": float}]

    Raises:
        MenuExtractionError: If any node recorded an error
    """
    t0 = time.perf_counter()

    initial_state: MenuExtractionState = {
        "image_bytes": image_bytes,
        "mime_type": mime_type,
        "model": model or Config.MENU_VISION_MODEL,
        "max_bytes": max_bytes or Config.MAX_IMAGE_BYTES,
        "validation_passed": None,
        "validation_error": None,
        "raw": None,
        "llm_error": None,
        "result": None,
        "timings": {},
        "total_ms": None,
        "debug": {},
        "error": None
    }

    graph = build_menu_extraction_graph()
    final_state = graph.invoke(initial_state)

    final_state["total_ms"] = calculate_ms(t0)
    print_pipeline_summary("Menu Extraction Pipeline", final_state)

    if final_state.get("error"):
        raise MenuExtractionError(final_state["error"])

    return final_state["result"] or []
