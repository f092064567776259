import re
from typing import List, NamedTuple, Pattern, Tuple

CalorieRange = Tuple[int, int]

class CalorieRule(NamedTuple):
    label: str
    pattern: Pattern[str]
    kcal: CalorieRange

# Rough kcal ranges for common Singapore hawker dishes.
# Evaluated top to bottom against canonical names; the first match wins.
CALORIE_RULES: List[CalorieRule] = [
    CalorieRule("chicken_rice", re.compile(r"chicken\s+rice|hainanese\s+chicken"), (550, 700)),
    CalorieRule("fish_soup", re.compile(r"fish\s*soup"), (250, 380)),
    CalorieRule("yong_tau_foo", re.compile(r"yong\s*tau\s*foo"), (300, 500)),
    CalorieRule("noodle_soup", re.compile(r"ban\s*mian|noodle\s*soup"), (450, 650)),
    CalorieRule("laksa", re.compile(r"laksa"), (600, 900)),
    CalorieRule("char_kway_teow", re.compile(r"char\s*kway\s*teow"), (740, 950)),
    CalorieRule("economic_rice", re.compile(r"economic\s*rice|mixed\s*veg"), (500, 800)),
    CalorieRule("fishball_noodle", re.compile(r"fishball\s*noodle"), (400, 600)),
    CalorieRule("duck_rice", re.compile(r"duck\s*rice"), (600, 800)),
]

DEFAULT_CALORIE_RANGE: CalorieRange = (350, 700)

def match_calorie_rule(canonical_name: str):
    """Return the first rule matching the canonical name, or None."""
    for rule in CALORIE_RULES:
        if rule.pattern.search(canonical_name):
            return rule
    return None

def estimate_calories(canonical_name: str) -> CalorieRange:
    """Estimate a (low, high) kcal range for an already canonicalized dish name."""
    rule = match_calorie_rule(canonical_name)
    return rule.kcal if rule else DEFAULT_CALORIE_RANGE
