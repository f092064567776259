from .canonicalizer import canonicalize_name
from .calorie_rules import CALORIE_RULES, DEFAULT_CALORIE_RANGE, estimate_calories
from .menu_analyser import FOLLOW_UP_QUESTIONS, analyse

__all__ = [
    "analyse",
    "canonicalize_name",
    "estimate_calories",
    "CALORIE_RULES",
    "DEFAULT_CALORIE_RANGE",
    "FOLLOW_UP_QUESTIONS",
]
