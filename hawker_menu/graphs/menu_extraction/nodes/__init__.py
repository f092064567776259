from .validation_node import validate_input
from .extraction_node import extract_items
from .output_validation_node import clean_items

__all__ = ["validate_input", "extract_items", "clean_items"]
