import os
from dotenv import load_dotenv

# Load .env from repo root (dotenv auto-walks up from CWD)
load_dotenv()


def _get_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def _read_secret_file(path: str | None) -> str | None:
    if not path:
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return None


# --- Upstream (apifootball) ---
FOOTBALL_API_BASE_URL = os.getenv("FOOTBALL_API_BASE_URL", "https://apiv3.apifootball.com").rstrip("/")
FOOTBALL_API_KEY = (
    os.getenv("FOOTBALL_API_KEY")
    or _read_secret_file(os.getenv("FOOTBALL_API_KEY_FILE"))
    or ""
)
FOOTBALL_API_TIMEOUT_MS = int(os.getenv("FOOTBALL_API_TIMEOUT_MS", "5000"))   # per-call timeout

# --- Resolver cache ---
FOOTBALL_CACHE_TTL_SEC = int(os.getenv("FOOTBALL_CACHE_TTL_SEC", "3600"))
FOOTBALL_CACHE_MAX_ENTRIES = int(os.getenv("FOOTBALL_CACHE_MAX_ENTRIES", "1000"))

# --- Offline mode default at startup ---
FOOTBALL_OFFLINE_ENABLED = _get_bool("FOOTBALL_OFFLINE_ENABLED", False)

CORS_ORIGIN = os.getenv("CORS_ORIGIN", "*")
