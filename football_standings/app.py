from datetime import datetime, timezone

from flask import Flask
from werkzeug.exceptions import HTTPException

from . import settings
from .app_utils import make_error, make_ok
from .config import setup_logger
from .constants import DEV_SERVER_HOST, DEV_SERVER_PORT
from .routes.standings_api import bp as standings_api_bp

app = Flask(__name__)

logger = setup_logger(__name__)

app.register_blueprint(standings_api_bp)


@app.after_request
def add_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = settings.CORS_ORIGIN
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    response.headers["Access-Control-Max-Age"] = "3600"
    return response


@app.errorhandler(Exception)
def handle_unexpected(exc):
    if isinstance(exc, HTTPException):
        return make_error(exc.name, exc.description or exc.name, status_code=exc.code or 500)
    logger.exception("unhandled_error: %s", exc)
    return make_error("internal_error", "Internal server error", status_code=500)


@app.route("/health", methods=["GET"])
def health():
    return make_ok(
        {"ok": True, "ts": datetime.now(timezone.utc).isoformat()},
        "OK",
        status_code=200,
    )


if __name__ == "__main__":
    app.run(debug=True, host=DEV_SERVER_HOST, port=DEV_SERVER_PORT)
