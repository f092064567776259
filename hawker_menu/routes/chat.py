import itertools
import traceback
from flask import Blueprint, request, jsonify, Response, current_app, stream_with_context
from pydantic import ValidationError

from ..models.chat import ChatRequest
from ..services.chat.chat_config import ChatConfig
from ..services.chat.chat_streamer import MenuChatStreamer
from ..utils.helpers import error_details
from .analysis import validation_issues

chat_bp = Blueprint('chat', __name__)

@chat_bp.post("/api/chat")
def chat():
    """
    Stream a food-assistant reply as plain text.
    Expects JSON: { "messages": [{ "role": "user", "content": "..." }], "context": { "items": [...] } }
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify({"error": "Invalid payload", "issues": [{"msg": "JSON object body required"}]}), 400

    try:
        payload = ChatRequest.model_validate(body)
    except ValidationError as ve:
        return jsonify({"error": "Invalid payload", "issues": validation_issues(ve)}), 400

    streamer = MenuChatStreamer(ChatConfig())
    try:
        # Pull the first chunk eagerly so upstream failures still get a JSON 500
        chunks = streamer.stream_reply(payload.messages, payload.context)
        first = next(chunks, "")
    except Exception as e:
        print(f"[ERROR] /api/chat error: {str(e)}")
        print(traceback.format_exc())
        return jsonify({
            "error": "Unexpected server error",
            "details": error_details(e, current_app.config['IS_PRODUCTION']),
        }), 500

    headers = {
        "Cache-Control": "no-cache, no-transform",
        "X-Accel-Buffering": "no",
    }
    return Response(
        stream_with_context(itertools.chain([first], chunks)),
        mimetype="text/plain",
        headers=headers,
    )
