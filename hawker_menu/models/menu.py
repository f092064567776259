# hawker_menu/models/menu.py
from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from typing import Annotated, Any, List, Optional, Tuple

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

class MenuItem(BaseModel):
    """One dish as read off the stall menu."""
    model_config = ConfigDict(frozen=True)

    name: NonBlankStr
    price: float = Field(..., ge=0, allow_inf_nan=False, strict=True)

class AnalyseRequest(BaseModel):
    items: List[MenuItem] = Field(..., min_length=1)

class CanonicalItem(BaseModel):
    name: str
    price: float
    calories: Tuple[int, int]  # (low, high) kcal

class AnalysisResult(BaseModel):
    cheapest: List[CanonicalItem]
    most_expensive: List[CanonicalItem]
    healthiest: Optional[CanonicalItem] = None
    most_filling: Optional[CanonicalItem] = None
    follow_up_questions: List[str] = []

# Relaxed shape for vision-model output; cleaned before it reaches the analyser
class ExtractedItem(BaseModel):
    name: Optional[str] = None
    price: Any = None

class ExtractedItems(BaseModel):
    items: List[ExtractedItem] = []
