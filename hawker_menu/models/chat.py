# hawker_menu/models/chat.py
from pydantic import BaseModel, Field
from typing import List, Literal, Optional

class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str = Field(..., min_length=1)

class ContextItem(BaseModel):
    name: str
    price: float

class ChatContext(BaseModel):
    items: Optional[List[ContextItem]] = None
    conversationId: Optional[str] = None

class ChatRequest(BaseModel):
    messages: List[ChatMessage] = Field(..., min_length=1)
    context: Optional[ChatContext] = None
