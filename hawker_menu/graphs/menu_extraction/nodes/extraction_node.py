import time

from hawker_menu.config.settings import Config
from ..services.gemini.gemini_menu import gemini_extract_menu
from ..state.menu_extraction_state import MenuExtractionState
from hawker_menu.utils.timing import calculate_ms, print_node_summary

def extract_items(state: MenuExtractionState) -> MenuExtractionState:
    """
    Node that reads menu items off the image with Gemini.

    Args:
        state: Current graph state containing validated input data

    Returns:
        Updated state with the raw model payload
    """
    t0 = time.perf_counter()

    if not state.get("validation_passed"):
        state["timings"]["extract_ms"] = calculate_ms(t0)
        return state

    try:
        raw = gemini_extract_menu(
            state["model"], state["image_bytes"], state["mime_type"],
            project=Config.GOOGLE_CLOUD_PROJECT, location=Config.GOOGLE_CLOUD_LOCATION,
        )
        if "error" in raw:
            state["debug"]["raw_text"] = raw.get("raw")
            raise ValueError(raw["error"])

        state["raw"] = raw
        state["llm_error"] = None

        timing_ms = calculate_ms(t0)
        state["timings"]["extract_ms"] = timing_ms
        print_node_summary("extract", True, timing_ms, raw_items=len(raw.get("items") or []))

    except Exception as e:
        state["raw"] = None
        state["llm_error"] = str(e)
        state["error"] = f"extraction_failed: {str(e)}"

        timing_ms = calculate_ms(t0)
        state["timings"]["extract_ms"] = timing_ms
        print_node_summary("extract", False, timing_ms, error=str(e))

    return state
