import re
from typing import List, Pattern, Tuple

# Malay/Hokkien menu words folded into the English vocabulary the calorie rules use.
# Applied in order, whole words only.
NAME_SUBSTITUTIONS: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"\bmee\b"), "noodle"),
    (re.compile(r"\bnasi\b"), "rice"),
    (re.compile(r"\bbee hoon\b"), "rice vermicelli"),
]

_WHITESPACE = re.compile(r"\s+")

def _squash(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()

def canonicalize_name(name: str) -> str:
    """
    Normalize a dish name for matching and display.

    Lower-cases, collapses whitespace and rewrites known menu words
    (e.g. 'Mee Goreng' -> 'noodle goreng', 'Bee  Hoon' -> 'rice vermicelli').
    Idempotent.
    """
    n = _squash((name or "").lower())
    for pattern, replacement in NAME_SUBSTITUTIONS:
        n = pattern.sub(replacement, n)
    return _squash(n)
