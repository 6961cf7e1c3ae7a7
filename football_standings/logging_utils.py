"""Logging helpers: per-key rate limiting for upstream warnings and one-shot notices."""
from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Dict, Hashable, Optional, Set, Tuple
from urllib.parse import urlsplit, urlunsplit


class RateLimitedLogger:
    """Emit at most one record per key within ``window_seconds``."""

    def __init__(
        self,
        logger: logging.Logger,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._logger = logger
        self._window = float(max(window_seconds, 0))
        self._clock = clock
        self._last_logged: Dict[Tuple[Any, ...], float] = {}
        self._lock = threading.Lock()

    def _should_emit(self, key: Tuple[Any, ...]) -> bool:
        now = self._clock()
        with self._lock:
            last = self._last_logged.get(key)
            if last is not None and (now - last) < self._window:
                return False
            self._last_logged[key] = now
            return True

    def log(self, level: int, key: Tuple[Any, ...], msg: str, *args: Any, **kwargs: Any) -> bool:
        if not self._should_emit(tuple(key)):
            return False
        self._logger.log(level, msg, *args, **kwargs)
        return True

    def warning(self, key: Tuple[Any, ...], msg: str, *args: Any, **kwargs: Any) -> bool:
        return self.log(logging.WARNING, key, msg, *args, **kwargs)


_warn_once_lock = threading.Lock()
_warned_keys: Set[Hashable] = set()


def warn_once(key: Hashable, msg: str, *args: Any, logger: Optional[logging.Logger] = None) -> bool:
    """Emit a warning once per key for the life of the process."""

    with _warn_once_lock:
        if key in _warned_keys:
            return False
        _warned_keys.add(key)

    (logger or logging.getLogger(__name__)).warning(msg, *args)
    return True


def reset_warn_once_cache() -> None:
    """Test helper to clear the warn-once registry."""

    with _warn_once_lock:
        _warned_keys.clear()


def scrub_url(url: Optional[str]) -> str:
    """Drop the query string (which carries the API key) before logging a URL."""
    if not url:
        return ""
    try:
        parts = urlsplit(url)
        return urlunsplit((parts.scheme, parts.netloc, parts.path, "", parts.fragment))
    except ValueError:
        return url
