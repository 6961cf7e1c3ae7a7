import threading

import pytest

from football_standings import fallback_data
from football_standings.models import Country, League, Standing, Team
from football_standings.services.standings import StandingsResolver


def _standing(team_id: str, team_name: str, position: str, league_id: str = "152") -> Standing:
    return Standing(
        country_name="England",
        league_id=league_id,
        league_name="Premier League",
        team_id=team_id,
        team_name=team_name,
        position=position,
        played="10",
        wins="7",
        draws="2",
        losses="1",
        goals_for="20",
        goals_against="8",
        points="23",
    )


class CountingUpstream:
    """Upstream double that records every fetch."""

    def __init__(self, countries=None, leagues=None, standings=None, teams=None):
        self.countries = countries or []
        self.leagues = leagues or {}
        self.standings = standings or {}
        self.teams = teams or {}
        self.calls = []

    def fetch_countries(self):
        self.calls.append(("countries",))
        return list(self.countries)

    def fetch_leagues(self, country_name):
        self.calls.append(("leagues", country_name))
        return list(self.leagues.get(country_name, []))

    def fetch_standings(self, league_id):
        self.calls.append(("standings", league_id))
        return list(self.standings.get(league_id, []))

    def fetch_teams(self, league_id):
        self.calls.append(("teams", league_id))
        return list(self.teams.get(league_id, []))

    def count(self, kind):
        return sum(1 for call in self.calls if call[0] == kind)


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def upstream():
    return CountingUpstream(
        countries=[Country("41", "England"), Country("6", "Spain")],
        leagues={
            "England": [
                League("153", "Championship", "41", "England"),
                League("152", "Premier League", "41", "England"),
            ],
        },
        standings={
            "152": [
                _standing("2629", "Manchester City", "1"),
                _standing("2633", "Liverpool", "2"),
            ],
        },
        teams={"152": [Team("2629", "Manchester City", "city.png")]},
    )


@pytest.fixture
def resolver(upstream):
    return StandingsResolver(upstream, cache_ttl=60)


# -------- offline mode --------

def test_offline_mode_defaults_from_constructor(upstream):
    assert StandingsResolver(upstream).is_offline_mode() is False
    assert StandingsResolver(upstream, offline_mode=True).is_offline_mode() is True


def test_toggle_round_trip(resolver):
    resolver.set_offline_mode(True)
    assert resolver.is_offline_mode() is True
    resolver.set_offline_mode(False)
    assert resolver.is_offline_mode() is False


def test_offline_flag_is_per_instance(upstream):
    first = StandingsResolver(upstream)
    second = StandingsResolver(upstream)
    first.set_offline_mode(True)
    assert second.is_offline_mode() is False


def test_concurrent_toggles_leave_a_written_value(resolver):
    barrier = threading.Barrier(8)
    observed = []

    def toggle(value):
        barrier.wait()
        for _ in range(200):
            resolver.set_offline_mode(value)
            observed.append(resolver.is_offline_mode())

    threads = [threading.Thread(target=toggle, args=(i % 2 == 0,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(observed) == 8 * 200
    assert all(type(value) is bool for value in observed)
    assert set(observed) <= {True, False}

    resolver.set_offline_mode(True)
    assert resolver.is_offline_mode() is True
    resolver.set_offline_mode(False)
    assert resolver.is_offline_mode() is False


@pytest.mark.parametrize(
    "call, expected",
    [
        (lambda r: r.get_countries(), fallback_data.fallback_countries()),
        (lambda r: r.get_leagues("England"), fallback_data.fallback_leagues("england")),
        (lambda r: r.get_standings("152"), fallback_data.fallback_standings("152")),
        (lambda r: r.get_teams("152"), fallback_data.fallback_teams("152")),
    ],
)
def test_offline_returns_fallback_even_with_warm_cache(resolver, upstream, call, expected):
    call(resolver)  # warm the online cache
    calls_before = len(upstream.calls)

    resolver.set_offline_mode(True)
    assert call(resolver) == expected
    assert len(upstream.calls) == calls_before


def test_offline_fallback_tables():
    resolver = StandingsResolver(CountingUpstream(), offline_mode=True)

    assert [c.name for c in resolver.get_countries()] == [
        "England", "Spain", "Germany", "France", "Italy",
    ]
    assert [lg.id for lg in resolver.get_leagues("ENGLAND")] == ["152", "153"]
    assert [lg.name for lg in resolver.get_leagues("spain")] == ["La Liga"]
    assert [lg.name for lg in resolver.get_leagues("Germany")] == ["Bundesliga"]
    assert resolver.get_leagues("France") == []
    assert len(resolver.get_standings("152")) == 3
    assert resolver.get_standings("302") == []
    assert len(resolver.get_teams("152")) == 6
    assert resolver.get_teams("153") == []


def test_switching_back_online_serves_surviving_cache(resolver, upstream):
    first = resolver.get_standings("152")
    resolver.set_offline_mode(True)
    resolver.get_standings("152")
    resolver.set_offline_mode(False)

    assert resolver.get_standings("152") == first
    assert upstream.count("standings") == 1


# -------- caching --------

@pytest.mark.parametrize(
    "call, kind",
    [
        (lambda r: r.get_countries(), "countries"),
        (lambda r: r.get_leagues("England"), "leagues"),
        (lambda r: r.get_standings("152"), "standings"),
        (lambda r: r.get_teams("152"), "teams"),
    ],
)
def test_second_call_within_ttl_hits_cache(resolver, upstream, call, kind):
    first = call(resolver)
    second = call(resolver)

    assert first
    assert second == first
    assert upstream.count(kind) == 1


@pytest.mark.parametrize(
    "call, kind",
    [
        (lambda r: r.get_countries(), "countries"),
        (lambda r: r.get_leagues("Atlantis"), "leagues"),
        (lambda r: r.get_standings("999"), "standings"),
        (lambda r: r.get_teams("999"), "teams"),
    ],
)
def test_empty_result_is_never_cached(call, kind):
    upstream = CountingUpstream()
    resolver = StandingsResolver(upstream, cache_ttl=60)

    assert call(resolver) == []
    assert call(resolver) == []
    assert upstream.count(kind) == 2


def test_entry_refetched_after_ttl(upstream):
    clock = FakeClock()
    resolver = StandingsResolver(upstream, cache_ttl=30, clock=clock)

    resolver.get_teams("152")
    clock.now += 31
    resolver.get_teams("152")

    assert upstream.count("teams") == 2


def test_league_cache_key_is_verbatim(resolver, upstream):
    upstream.leagues["england"] = upstream.leagues["England"]

    resolver.get_leagues("England")
    resolver.get_leagues("england")

    assert upstream.count("leagues") == 2


def test_cached_list_is_not_shared_with_callers(resolver):
    first = resolver.get_countries()
    first.clear()
    assert resolver.get_countries()


def test_clear_caches_forces_refetch(resolver, upstream):
    resolver.get_countries()
    resolver.clear_caches()
    resolver.get_countries()
    assert upstream.count("countries") == 2


# -------- compound lookup --------

def test_team_standing_found(resolver):
    standing = resolver.get_team_standing("England", "Premier League", "Manchester City")

    assert standing is not None
    assert standing.position == "1"
    assert standing.team_id == "2629"


def test_team_standing_unknown_team(resolver):
    assert resolver.get_team_standing("England", "Premier League", "Unknown FC") is None


def test_unknown_league_short_circuits_before_standings(resolver, upstream, monkeypatch):
    def fail(*_):
        raise AssertionError("get_standings must not be called")

    monkeypatch.setattr(resolver, "get_standings", fail)

    assert resolver.get_team_standing("Atlantis", "Nowhere League", "Nobody") is None
    assert upstream.count("standings") == 0


@pytest.mark.parametrize("league_name", ["premier league", "PREMIER LEAGUE", "Premier League"])
def test_league_and_team_matching_ignores_case(resolver, league_name):
    standing = resolver.get_team_standing("England", league_name, "LIVERPOOL")
    assert standing is not None
    assert standing.team_name == "Liverpool"


def test_first_match_wins_on_duplicates(upstream):
    upstream.leagues["England"].append(League("999", "Premier League", "41", "England"))
    upstream.standings["152"].append(_standing("9999", "Manchester City", "17"))
    resolver = StandingsResolver(upstream)

    standing = resolver.get_team_standing("England", "premier league", "manchester city")

    assert standing.team_id == "2629"
    assert ("standings", "999") not in upstream.calls


def test_team_standing_uses_league_cache(resolver, upstream):
    resolver.get_team_standing("England", "Premier League", "Liverpool")
    resolver.get_team_standing("England", "Premier League", "Manchester City")

    assert upstream.count("leagues") == 1
    assert upstream.count("standings") == 1


def test_team_standing_offline_uses_fallback():
    resolver = StandingsResolver(CountingUpstream(), offline_mode=True)

    standing = resolver.get_team_standing("england", "premier league", "arsenal")

    assert standing is not None
    assert standing.position == "3"
    assert standing.points == "43"
