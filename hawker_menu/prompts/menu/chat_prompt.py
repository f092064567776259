# chat_prompt.py
"""
System prompt for the hawker food assistant chat.
"""
import json
from typing import Any, Dict, List, Optional

ASSISTANT_PERSONA = [
    "You are a helpful nutrition and food assistant specialising in Singapore hawker centre food.",
    "You know common dish names, typical prices in SGD, healthier swaps, and rough calorie ranges.",
    "Always assume prices are in SGD and format as $ X.XX. Be concise and practical.",
    "You have NO tools or functions available. Never attempt tool calls or function calls. Respond only with plain text.",
]

def build_chat_system_prompt(
    items: Optional[List[Dict[str, Any]]] = None,
    extra_instructions: Optional[List[str]] = None,
) -> str:
    """
    Build the system instruction for a chat turn.

    Args:
        items: Extracted menu items ({name, price}) used to ground answers
        extra_instructions: System messages supplied in the conversation history

    Returns:
        Newline-joined system prompt
    """
    lines = list(ASSISTANT_PERSONA)
    if items:
        lines.append(f"Use these extracted menu items as context: {json.dumps(items, ensure_ascii=False)}")
    lines.extend(extra_instructions or [])
    return "\n".join(lines)
