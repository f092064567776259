from typing import Any, Dict, Iterator, List, Optional

from google.genai import types

from hawker_menu.models.chat import ChatContext, ChatMessage
from hawker_menu.prompts.menu.chat_prompt import build_chat_system_prompt
from hawker_menu.services.shared.gemini.gemini_client import make_client
from .chat_config import ChatConfig

# Gemini only knows "user" and "model" turns
ROLE_MAP = {"user": "user", "assistant": "model"}


class MenuChatStreamer:
    """Relays a chat conversation to Gemini and yields the reply as text chunks"""

    def __init__(self, config: ChatConfig):
        self.config = config

    def build_request(self, messages: List[ChatMessage], context: Optional[ChatContext] = None):
        """Split history into Gemini contents plus one system instruction"""
        items: Optional[List[Dict[str, Any]]] = None
        if context and context.items:
            items = [it.model_dump() for it in context.items]

        system_notes = [m.content for m in messages if m.role == "system"]
        system_prompt = build_chat_system_prompt(items, system_notes)

        contents = [
            types.Content(role=ROLE_MAP[m.role], parts=[types.Part.from_text(text=m.content)])
            for m in messages
            if m.role != "system"
        ]
        return system_prompt, contents

    def stream_reply(self, messages: List[ChatMessage], context: Optional[ChatContext] = None) -> Iterator[str]:
        """Stream the assistant reply"""
        system_prompt, contents = self.build_request(messages, context)

        client = make_client(self.config.project, self.config.location)
        cfg = types.GenerateContentConfig(
            system_instruction=system_prompt,
            temperature=0.6,
            max_output_tokens=2048,
        )
        stream = client.models.generate_content_stream(
            model=self.config.model,
            contents=contents,
            config=cfg,
        )
        for chunk in stream:
            text = getattr(chunk, "text", None)
            if text:
                yield text
