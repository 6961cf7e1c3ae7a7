from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..constants import (
    ACTION_COUNTRIES,
    ACTION_LEAGUES,
    ACTION_STANDINGS,
    ACTION_TEAMS,
    DEFAULT_COUNTRY_ID,
    country_id_for,
)
from ..errors import APIError
from ..logging_utils import RateLimitedLogger, scrub_url, warn_once
from ..models import Country, League, Standing, Team
from ..ports.upstream import UpstreamPort
from ..settings import FOOTBALL_API_BASE_URL, FOOTBALL_API_KEY, FOOTBALL_API_TIMEOUT_MS

log = logging.getLogger(__name__)

SOURCE = "apifootball"

T = TypeVar("T")


def _session() -> requests.Session:
    # total=0: exactly one attempt per fetch
    no_retry = HTTPAdapter(max_retries=Retry(total=0, connect=0, read=0, raise_on_status=False))
    session = requests.Session()
    session.mount("https://", no_retry)
    session.mount("http://", no_retry)
    session.headers.update({"Accept": "application/json"})
    return session


def resolve_country_id(country_name: str) -> str:
    """Map a human country name to upstream's country_id; unknown names get the default."""
    country_id = country_id_for(country_name)
    if country_id is not None:
        return country_id
    warn_once(
        ("apifootball_country_unmapped", (country_name or "").strip().lower()),
        "apifootball_country_unmapped name=%r default_id=%s",
        country_name,
        DEFAULT_COUNTRY_ID,
        logger=log,
    )
    return DEFAULT_COUNTRY_ID


class ApiFootballAdapter(UpstreamPort):
    """
    Thin client for the apifootball ``action=`` API.

    Every public fetch issues a single GET bounded by ``timeout_ms`` and returns
    an empty list on any failure: network error, timeout, non-2xx status, or a
    body that is not a JSON array of objects. Failures are logged, not raised.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or FOOTBALL_API_BASE_URL).rstrip("/")
        self.api_key = FOOTBALL_API_KEY if api_key is None else api_key
        self.timeout = (FOOTBALL_API_TIMEOUT_MS if timeout_ms is None else timeout_ms) / 1000.0
        self.session = session or _session()
        self._failures = RateLimitedLogger(log, window_seconds=60.0)

    # -------- UpstreamPort --------
    def fetch_countries(self) -> List[Country]:
        return self._fetch(ACTION_COUNTRIES, Country.from_api)

    def fetch_leagues(self, country_name: str) -> List[League]:
        return self._fetch(
            ACTION_LEAGUES,
            League.from_api,
            country_id=resolve_country_id(country_name),
        )

    def fetch_standings(self, league_id: str) -> List[Standing]:
        return self._fetch(ACTION_STANDINGS, Standing.from_api, league_id=league_id)

    def fetch_teams(self, league_id: str) -> List[Team]:
        return self._fetch(ACTION_TEAMS, Team.from_api, league_id=league_id)

    # -------- internals --------
    def _fetch(self, action: str, decode: Callable[[Any], T], **params: str) -> List[T]:
        try:
            rows = self._get_rows(action, params)
            try:
                items = [decode(row) for row in rows]
            except (TypeError, ValueError) as exc:
                raise APIError(SOURCE, "DECODE_ERROR", f"Unexpected {action} row shape", details=str(exc))
        except APIError as exc:
            self._failures.warning(
                (action, exc.code),
                "apifootball_fetch_failed action=%s params=%s code=%s message=%s",
                action,
                params,
                exc.code,
                exc.message,
            )
            return []
        log.debug("apifootball_fetch_ok action=%s params=%s rows=%d", action, params, len(items))
        return items

    def _get_rows(self, action: str, params: Dict[str, str]) -> List[Any]:
        query = {"action": action, "APIkey": self.api_key, **params}
        url = f"{self.base_url}/"
        try:
            response = self.session.get(url, params=query, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as exc:
            raise APIError(SOURCE, "TIMEOUT", f"{action} timed out after {self.timeout:.1f}s",
                           details=scrub_url(getattr(exc.request, "url", url)))
        except requests.exceptions.HTTPError as exc:
            status = getattr(exc.response, "status_code", None)
            raise APIError(SOURCE, "HTTP_ERROR", f"{action} returned HTTP {status}", details=scrub_url(url))
        except requests.exceptions.RequestException as exc:
            raise APIError(SOURCE, "NETWORK_ERROR", f"{action} request failed: {type(exc).__name__}",
                           details=scrub_url(url))

        try:
            payload = response.json()
        except (ValueError, RecursionError) as exc:
            raise APIError(SOURCE, "DECODE_ERROR", f"{action} body is not JSON", details=type(exc).__name__)

        # upstream reports "no data" or bad keys as a JSON object, e.g. {"error": 404, ...}
        if not isinstance(payload, list):
            raise APIError(
                SOURCE,
                "DECODE_ERROR",
                f"{action} body is not a JSON array",
                details=str(payload)[:200] if isinstance(payload, dict) else None,
            )
        return payload
