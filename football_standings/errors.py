from typing import Optional


class APIError(Exception):
    """Unified error class for upstream API failures."""

    def __init__(self, source: str, code: str, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.source = source
        self.code = code
        self.message = message
        self.details = details
