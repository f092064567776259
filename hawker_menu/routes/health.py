from flask import Blueprint, jsonify, current_app

health_bp = Blueprint('health', __name__)

@health_bp.get("/")
def index():
    """Service banner"""
    return jsonify({
        "service": "hawker-menu",
        "routes": ["/api/extract", "/api/analyse", "/api/chat", "/health", "/config"],
    }), 200

@health_bp.get("/health")
def health():
    """Health check endpoint"""
    return {"ok": True}, 200

@health_bp.get("/config")
def get_config():
    """Get application configuration including model settings"""
    return jsonify({
        "menu_vision_model": current_app.config['MENU_VISION_MODEL'],
        "menu_chat_model": current_app.config['MENU_CHAT_MODEL'],
        "max_image_bytes": current_app.config['MAX_IMAGE_BYTES'],
        "allowed_mime_types": sorted(current_app.config['ALLOWED_MIME_TYPES']),
        "google_cloud_location": current_app.config['GOOGLE_CLOUD_LOCATION'],
    }), 200
