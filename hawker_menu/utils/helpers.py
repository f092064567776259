import math
import re
from typing import Optional

def fnum(x, default: Optional[float] = None) -> Optional[float]:
    """Convert various formats to float, with regex extraction for strings"""
    if isinstance(x, bool):
        return default
    if isinstance(x, (int, float)):
        return float(x)
    if isinstance(x, str):
        s = x.replace(",", "").replace("$", "").strip()
        m = re.fullmatch(r"[-+]?\d+(\.\d+)?", s)
        if m:
            return float(m.group(0))
    return default

def is_valid_price(price) -> bool:
    return isinstance(price, float) and math.isfinite(price) and price >= 0

def normalize_mime_type(raw: Optional[str]) -> str:
    """Map browser-reported image types onto the ones the vision model accepts"""
    mime = (raw or "").split(";")[0].strip().lower()
    if mime == "image/jpg":
        return "image/jpeg"
    return mime or "image/jpeg"

def gather_image(request_files):
    """Return the uploaded file under the 'image' form field, if any"""
    f = request_files.get("image")
    if f and f.filename:
        return f
    return None

def error_details(error: Exception, is_production: bool) -> Optional[dict]:
    """Debug payload attached to 500 responses outside production"""
    if is_production:
        return None
    return {
        "message": str(error),
        "type": type(error).__name__,
        "statusCode": getattr(error, "code", None) or getattr(error, "status_code", None),
    }
