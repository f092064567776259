import time
from typing import Any, Dict, List
from pydantic import ValidationError

from hawker_menu.models.menu import ExtractedItems
from ..state.menu_extraction_state import MenuExtractionState
from hawker_menu.utils.helpers import fnum, is_valid_price
from hawker_menu.utils.timing import calculate_ms, print_node_summary

def clean_items(state: MenuExtractionState) -> MenuExtractionState:
    """
    Node that validates the raw model payload and keeps only usable items.

    Args:
        state: Current graph state containing the raw LLM payload

    Returns:
        Updated state with cleaned items in `result`
    """
    t0 = time.perf_counter()

    if state.get("error"):
        state["timings"]["clean_ms"] = calculate_ms(t0)
        return state

    try:
        parsed = ExtractedItems(**(state.get("raw") or {}))
        cleaned = _clean(parsed)
        state["result"] = cleaned
        state["debug"]["dropped_items"] = len(parsed.items) - len(cleaned)

        timing_ms = calculate_ms(t0)
        state["timings"]["clean_ms"] = timing_ms
        print_node_summary("clean", True, timing_ms, kept=len(cleaned), dropped=state["debug"]["dropped_items"])

    except ValidationError as e:
        state["result"] = None
        state["error"] = f"output_validation_failed: {str(e)}"

        timing_ms = calculate_ms(t0)
        state["timings"]["clean_ms"] = timing_ms
        print_node_summary("clean", False, timing_ms, error=str(e))

    return state

def _clean(parsed: ExtractedItems) -> List[Dict[str, Any]]:
    """Trim names; drop blank names and null, non-numeric, negative or non-finite prices."""
    items = []
    for it in parsed.items:
        name = (it.name or "").strip()
        price = fnum(it.price)
        if name and is_valid_price(price):
            items.append({"name": name, "price": price})
    return items
