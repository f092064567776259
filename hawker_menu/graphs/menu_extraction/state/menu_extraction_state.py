from typing import Any, Dict, List, Optional, TypedDict

class MenuExtractionState(TypedDict):
    """State for the menu extraction workflow"""

    # Input data
    image_bytes: bytes
    mime_type: str
    model: str
    max_bytes: int

    # Validation results
    validation_passed: Optional[bool]
    validation_error: Optional[str]

    # LLM results
    raw: Optional[Dict[str, Any]]
    llm_error: Optional[str]

    # Cleaned items: [{name, price}]
    result: Optional[List[Dict[str, Any]]]

    # Performance tracking
    timings: Dict[str, float]   # per-node ms
    total_ms: Optional[float]

    # Debug and error handling
    debug: Dict[str, Any]
    error: Optional[str]
