from __future__ import annotations

from .. import settings
from ..adapters.apifootball import ApiFootballAdapter
from ..services.standings import StandingsResolver


def upstream_adapter() -> ApiFootballAdapter:
    """Build the apifootball adapter from settings (base URL, key, timeout)."""
    return ApiFootballAdapter(
        base_url=settings.FOOTBALL_API_BASE_URL,
        api_key=settings.FOOTBALL_API_KEY,
        timeout_ms=settings.FOOTBALL_API_TIMEOUT_MS,
    )


def build_resolver(upstream=None) -> StandingsResolver:
    """
    Return a resolver wired to ``upstream`` (default: apifootball adapter),
    with cache TTL/size and the startup offline flag taken from settings.
    """
    return StandingsResolver(
        upstream or upstream_adapter(),
        cache_ttl=settings.FOOTBALL_CACHE_TTL_SEC,
        cache_max_entries=settings.FOOTBALL_CACHE_MAX_ENTRIES,
        offline_mode=settings.FOOTBALL_OFFLINE_ENABLED,
    )
