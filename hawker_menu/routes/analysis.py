import traceback
from flask import Blueprint, request, jsonify
from pydantic import ValidationError

from ..models.menu import AnalyseRequest
from ..services.menu_analysis import analyse

analysis_bp = Blueprint('analysis', __name__)

def validation_issues(error: ValidationError):
    return error.errors(include_url=False, include_context=False, include_input=False)

@analysis_bp.post("/api/analyse")
def analyse_menu():
    """
    Comparative picks over extracted menu items.
    Expects JSON: { "items": [{ "name": "chicken rice", "price": 3.5 }, ...] }
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify({"error": "Invalid payload", "issues": [{"msg": "JSON object body required"}]}), 400

    try:
        payload = AnalyseRequest.model_validate(body)
        result = analyse(payload.items)
    except ValidationError as ve:
        return jsonify({"error": "Invalid payload", "issues": validation_issues(ve)}), 400
    except Exception as e:
        print(f"[ERROR] /api/analyse error: {str(e)}")
        print(traceback.format_exc())
        return jsonify({"error": "Unexpected server error"}), 500

    print(f"[api] analysed {len(payload.items)} items → cheapest={len(result.cheapest)} most_expensive={len(result.most_expensive)}")
    return jsonify(result.model_dump(mode="json")), 200
