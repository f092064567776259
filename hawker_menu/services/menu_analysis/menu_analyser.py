from typing import Any, Iterable, List, Mapping, Union

from hawker_menu.models.menu import AnalyseRequest, AnalysisResult, CanonicalItem, MenuItem
from .canonicalizer import canonicalize_name
from .calorie_rules import estimate_calories

FOLLOW_UP_QUESTIONS = (
    "Show me the cheapest and most expensive again.",
    "Which options are vegetarian?",
    "How can I make the healthiest option more filling?",
)

def to_canonical_item(item: MenuItem) -> CanonicalItem:
    name = canonicalize_name(item.name)
    return CanonicalItem(name=name, price=item.price, calories=estimate_calories(name))

def analyse(items: Iterable[Union[MenuItem, Mapping[str, Any]]]) -> AnalysisResult:
    """
    Summarize a stall menu: cheapest and most expensive dishes (all ties kept,
    input order preserved), healthiest and most filling dish (smallest / largest
    calorie upper bound, earliest item wins a tie).

    Args:
        items: MenuItem models or plain {"name", "price"} mappings

    Returns:
        AnalysisResult

    Raises:
        pydantic.ValidationError: If the list is empty or any item is malformed
    """
    request = AnalyseRequest.model_validate({"items": list(items)})
    canonical: List[CanonicalItem] = [to_canonical_item(it) for it in request.items]

    min_price = float("inf")
    max_price = float("-inf")
    healthiest = None
    most_filling = None

    for item in canonical:
        min_price = min(min_price, item.price)
        max_price = max(max_price, item.price)
        if healthiest is None or item.calories[1] < healthiest.calories[1]:
            healthiest = item
        if most_filling is None or item.calories[1] > most_filling.calories[1]:
            most_filling = item

    return AnalysisResult(
        cheapest=[it for it in canonical if it.price == min_price],
        most_expensive=[it for it in canonical if it.price == max_price],
        healthiest=healthiest,
        most_filling=most_filling,
        follow_up_questions=list(FOLLOW_UP_QUESTIONS),
    )
