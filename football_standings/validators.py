from typing import Optional

from .config import setup_logger

logger = setup_logger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ValidationError(ValueError):
    """Raised for missing or malformed request parameters."""

    def __init__(self, param: str, message: str):
        super().__init__(message)
        self.param = param
        self.message = message


def require_param(name: str, raw: Optional[str]) -> str:
    """Return the stripped parameter, rejecting missing/blank values."""
    value = (raw or "").strip()
    if not value:
        logger.warning("param_blank: %s", name)
        raise ValidationError(name, f"Parameter '{name}' must not be blank")
    return value


def parse_bool_param(name: str, raw: Optional[str]) -> bool:
    """Strict boolean parsing for required flag parameters."""
    value = require_param(name, raw).lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    logger.warning("param_not_bool: %s=%s", name, raw)
    raise ValidationError(name, f"Parameter '{name}' must be a boolean")
