"""Hardcoded records served while the resolver is in offline mode."""

from __future__ import annotations

from typing import Dict, List, Tuple

from .models import Country, League, Standing, Team

POPULATED_LEAGUE_ID = "152"

FALLBACK_COUNTRIES: Tuple[Country, ...] = (
    Country("41", "England"),
    Country("6", "Spain"),
    Country("5", "Germany"),
    Country("3", "France"),
    Country("4", "Italy"),
)

# keyed by lowercase country name
FALLBACK_LEAGUES: Dict[str, Tuple[League, ...]] = {
    "england": (
        League("152", "Premier League", "41", "England"),
        League("153", "Championship", "41", "England"),
    ),
    "spain": (League("302", "La Liga", "6", "Spain"),),
    "germany": (League("175", "Bundesliga", "5", "Germany"),),
}


def _premier_league_row(team_id, team_name, position, played, wins, draws, losses, gf, ga, pts):
    return Standing(
        country_name="England",
        league_id=POPULATED_LEAGUE_ID,
        league_name="Premier League",
        team_id=team_id,
        team_name=team_name,
        position=position,
        played=played,
        wins=wins,
        draws=draws,
        losses=losses,
        goals_for=gf,
        goals_against=ga,
        points=pts,
    )


FALLBACK_STANDINGS: Dict[str, Tuple[Standing, ...]] = {
    POPULATED_LEAGUE_ID: (
        _premier_league_row("2629", "Manchester City", "1", "20", "15", "3", "2", "55", "25", "48"),
        _premier_league_row("2633", "Liverpool", "2", "20", "14", "4", "2", "52", "28", "46"),
        _premier_league_row("2628", "Arsenal", "3", "20", "13", "4", "3", "48", "30", "43"),
    ),
}

_BADGE = "https://apiv3.apifootball.com/badges/{}.png"

FALLBACK_TEAMS: Dict[str, Tuple[Team, ...]] = {
    POPULATED_LEAGUE_ID: (
        Team("2629", "Manchester City", _BADGE.format("2629_manchester-city")),
        Team("2633", "Liverpool", _BADGE.format("2633_liverpool")),
        Team("2634", "Arsenal", _BADGE.format("2634_arsenal")),
        Team("2635", "Chelsea", _BADGE.format("2635_chelsea")),
        Team("2631", "Manchester United", _BADGE.format("2631_manchester-united")),
        Team("2636", "Tottenham", _BADGE.format("2636_tottenham")),
    ),
}


def fallback_countries() -> List[Country]:
    return list(FALLBACK_COUNTRIES)


def fallback_leagues(country_name: str) -> List[League]:
    return list(FALLBACK_LEAGUES.get((country_name or "").lower(), ()))


def fallback_standings(league_id: str) -> List[Standing]:
    return list(FALLBACK_STANDINGS.get(league_id, ()))


def fallback_teams(league_id: str) -> List[Team]:
    return list(FALLBACK_TEAMS.get(league_id, ()))
