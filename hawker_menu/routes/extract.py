import traceback
from flask import Blueprint, request, jsonify, current_app

from ..graphs.menu_extraction import run_menu_extraction
from ..utils.helpers import gather_image, normalize_mime_type, error_details

extract_bp = Blueprint('extract', __name__)

@extract_bp.post("/api/extract")
def extract_menu():
    """
    Read {name, price} items off a menu photo.
    Expects multipart/form-data with the photo under the 'image' field.
    """
    if request.mimetype != "multipart/form-data":
        return jsonify({"error": "Expected multipart/form-data with an 'image' field"}), 400

    image = gather_image(request.files)
    if image is None:
        return jsonify({"error": "Missing image file under field 'image'"}), 400

    mime_type = normalize_mime_type(image.mimetype)
    if mime_type not in current_app.config['ALLOWED_MIME_TYPES']:
        return jsonify({"error": "Unsupported file type. Please upload a PNG or JPEG image."}), 400

    data = image.read()
    if len(data) > current_app.config['MAX_IMAGE_BYTES']:
        return jsonify({"error": "Image too large (> 4MB). Please upload a smaller photo or try again."}), 413

    model = request.form.get("model") or current_app.config['MENU_VISION_MODEL']
    try:
        items = run_menu_extraction(data, mime_type, model, max_bytes=current_app.config['MAX_IMAGE_BYTES'])
    except Exception as e:
        print(f"[ERROR] /api/extract error: {str(e)}")
        print(traceback.format_exc())
        return jsonify({
            "error": "Unexpected server error",
            "details": error_details(e, current_app.config['IS_PRODUCTION']),
        }), 500

    print(f"[api] extracted {len(items)} items with {model}")
    return jsonify({"items": items}), 200
