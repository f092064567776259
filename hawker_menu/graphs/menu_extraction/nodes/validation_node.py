import time

from hawker_menu.config.settings import Config
from ..state.menu_extraction_state import MenuExtractionState
from hawker_menu.utils.timing import calculate_ms, print_node_summary

def validate_input(state: MenuExtractionState) -> MenuExtractionState:
    """
    Node that validates the uploaded image before any model call.

    Args:
        state: Current graph state containing the image bytes

    Returns:
        Updated state with validation results
    """
    t0 = time.perf_counter()

    try:
        data = state.get("image_bytes")
        if not data:
            raise ValueError("image is empty")

        if state.get("mime_type") not in Config.ALLOWED_MIME_TYPES:
            raise ValueError(f"unsupported image type: {state.get('mime_type')}")

        max_bytes = state.get("max_bytes") or Config.MAX_IMAGE_BYTES
        if len(data) > max_bytes:
            raise ValueError(f"image too large: {len(data)} bytes > {max_bytes}")

        state["validation_passed"] = True
        state["validation_error"] = None

        timing_ms = calculate_ms(t0)
        state["timings"]["validate_ms"] = timing_ms
        print_node_summary("validate", True, timing_ms, bytes=len(data))

    except ValueError as e:
        state["validation_passed"] = False
        state["validation_error"] = str(e)
        state["error"] = f"validation_failed: {str(e)}"

        timing_ms = calculate_ms(t0)
        state["timings"]["validate_ms"] = timing_ms
        print_node_summary("validate", False, timing_ms, error=str(e))

    return state
