from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional, TypeVar

from .. import fallback_data
from ..cache import TTLCache
from ..constants import COUNTRIES_CACHE_KEY
from ..models import Country, League, Standing, Team
from ..ports.upstream import UpstreamPort

log = logging.getLogger(__name__)

T = TypeVar("T")


class StandingsResolver:
    """
    Answers country/league/team/standing lookups from upstream or from the
    offline fallback tables.

    Online lookups are memoised per resource in a ``TTLCache``; only non-empty
    results are stored, so an upstream gap is retried on the next call.
    Offline lookups bypass the caches entirely and always return the fallback
    slice. Toggling the mode leaves cached entries in place.

    Concurrent misses on the same key are not coalesced: each caller may hit
    upstream and the last write wins.
    """

    def __init__(
        self,
        upstream: UpstreamPort,
        *,
        cache_ttl: float = 3600,
        cache_max_entries: int = 1000,
        offline_mode: bool = False,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.upstream = upstream
        self._offline = threading.Event()
        if offline_mode:
            self._offline.set()

        cache_kwargs = {"max_entries": cache_max_entries}
        if clock is not None:
            cache_kwargs["clock"] = clock
        self.countries_cache: TTLCache[List[Country]] = TTLCache(cache_ttl, **cache_kwargs)
        self.leagues_cache: TTLCache[List[League]] = TTLCache(cache_ttl, **cache_kwargs)
        self.standings_cache: TTLCache[List[Standing]] = TTLCache(cache_ttl, **cache_kwargs)
        self.teams_cache: TTLCache[List[Team]] = TTLCache(cache_ttl, **cache_kwargs)

    # -------- offline mode --------
    def set_offline_mode(self, enabled: bool) -> None:
        if enabled:
            self._offline.set()
        else:
            self._offline.clear()
        log.info("offline_mode=%s", bool(enabled))

    def is_offline_mode(self) -> bool:
        return self._offline.is_set()

    # -------- lookups --------
    def get_countries(self) -> List[Country]:
        if self.is_offline_mode():
            return fallback_data.fallback_countries()
        return self._cached(
            self.countries_cache, COUNTRIES_CACHE_KEY, self.upstream.fetch_countries
        )

    def get_leagues(self, country_name: str) -> List[League]:
        if self.is_offline_mode():
            return fallback_data.fallback_leagues(country_name)
        # key is taken verbatim: "England" and "england" are separate entries
        return self._cached(
            self.leagues_cache, country_name, lambda: self.upstream.fetch_leagues(country_name)
        )

    def get_standings(self, league_id: str) -> List[Standing]:
        if self.is_offline_mode():
            return fallback_data.fallback_standings(league_id)
        return self._cached(
            self.standings_cache, league_id, lambda: self.upstream.fetch_standings(league_id)
        )

    def get_teams(self, league_id: str) -> List[Team]:
        if self.is_offline_mode():
            return fallback_data.fallback_teams(league_id)
        return self._cached(
            self.teams_cache, league_id, lambda: self.upstream.fetch_teams(league_id)
        )

    def get_team_standing(
        self, country_name: str, league_name: str, team_name: str
    ) -> Optional[Standing]:
        """Resolve one team's row from country, league and team names.

        Both name matches are case-insensitive and the first match in list
        order wins.
        """
        wanted_league = (league_name or "").casefold()
        league = next(
            (lg for lg in self.get_leagues(country_name) if lg.name.casefold() == wanted_league),
            None,
        )
        if league is None:
            log.debug("team_standing_league_miss country=%r league=%r", country_name, league_name)
            return None

        wanted_team = (team_name or "").casefold()
        standing = next(
            (row for row in self.get_standings(league.id) if row.team_name.casefold() == wanted_team),
            None,
        )
        if standing is None:
            log.debug("team_standing_team_miss league_id=%s team=%r", league.id, team_name)
        return standing

    def clear_caches(self) -> None:
        for cache in (self.countries_cache, self.leagues_cache, self.standings_cache, self.teams_cache):
            cache.clear()

    # -------- internals --------
    def _cached(self, cache: TTLCache[List[T]], key: str, fetch: Callable[[], List[T]]) -> List[T]:
        hit = cache.get(key)
        if hit is not None:
            return list(hit)
        result = list(fetch() or [])
        if result:
            cache.put(key, result)
        else:
            log.debug("resolver_empty_result key=%r not cached", key)
        return list(result)
