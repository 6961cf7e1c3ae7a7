from typing import Any, Dict, Optional

from flask import jsonify

from .validators import ValidationError


def make_ok(data: Optional[Any] = None, message: str = "success", status_code: int = 200):
    """Return a standardized success response."""
    payload = {
        "status": "ok",
        "message": message,
        "data": data,
    }
    return jsonify(payload), status_code


def make_error(error: Any, message: str = "An error occurred", status_code: int = 400):
    """Return a standardized error response."""
    if isinstance(error, ValidationError):
        error = {"param": error.param, "message": error.message}

    payload = {
        "status": "error",
        "message": message,
        "error": error,
    }
    return jsonify(payload), status_code


def with_links(item: Dict[str, Any], links: Dict[str, str]) -> Dict[str, Any]:
    """Attach hypermedia links under ``_links`` (rel -> href)."""
    out = dict(item)
    out["_links"] = {rel: href for rel, href in links.items() if href}
    return out
