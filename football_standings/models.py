"""Value records returned by the upstream adapter and the resolver.

All numeric standing columns stay text exactly as upstream sends them.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping


def _text(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    return "" if value is None else str(value)


def _require_mapping(payload: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise TypeError(f"{kind} payload must be an object, got {type(payload).__name__}")
    return payload


@dataclass(frozen=True)
class Country:
    id: str
    name: str

    @classmethod
    def from_api(cls, payload: Any) -> "Country":
        data = _require_mapping(payload, "country")
        return cls(id=_text(data, "country_id"), name=_text(data, "country_name"))

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class League:
    id: str
    name: str
    country_id: str
    country_name: str

    @classmethod
    def from_api(cls, payload: Any) -> "League":
        data = _require_mapping(payload, "league")
        return cls(
            id=_text(data, "league_id"),
            name=_text(data, "league_name"),
            country_id=_text(data, "country_id"),
            country_name=_text(data, "country_name"),
        )

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class Team:
    key: str
    name: str
    badge_url: str = ""

    @classmethod
    def from_api(cls, payload: Any) -> "Team":
        data = _require_mapping(payload, "team")
        return cls(
            key=_text(data, "team_key"),
            name=_text(data, "team_name"),
            badge_url=_text(data, "team_badge"),
        )

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


# Standing attribute -> upstream JSON key. "payed" is upstream's spelling.
STANDING_FIELDS = {
    "country_name": "country_name",
    "league_id": "league_id",
    "league_name": "league_name",
    "team_id": "team_id",
    "team_name": "team_name",
    "position": "overall_league_position",
    "played": "overall_league_payed",
    "wins": "overall_league_W",
    "draws": "overall_league_D",
    "losses": "overall_league_L",
    "goals_for": "overall_league_GF",
    "goals_against": "overall_league_GA",
    "points": "overall_league_PTS",
    "team_badge": "team_badge",
}


@dataclass(frozen=True)
class Standing:
    """One team's row in one league table at fetch time."""

    country_name: str
    league_id: str
    league_name: str
    team_id: str
    team_name: str
    position: str
    played: str
    wins: str
    draws: str
    losses: str
    goals_for: str
    goals_against: str
    points: str
    team_badge: str = ""

    @classmethod
    def from_api(cls, payload: Any) -> "Standing":
        data = _require_mapping(payload, "standing")
        return cls(**{attr: _text(data, key) for attr, key in STANDING_FIELDS.items()})

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
