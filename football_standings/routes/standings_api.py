from __future__ import annotations

import logging

from flask import Blueprint, request, url_for

from ..app_utils import make_error, make_ok, with_links
from ..composition.providers import build_resolver
from ..validators import ValidationError, parse_bool_param, require_param

bp = Blueprint("standings_api", __name__, url_prefix="/standings")
_service_singleton = None
log = logging.getLogger(__name__)


def _get_service():
    global _service_singleton
    if _service_singleton is None:
        _service_singleton = build_resolver()
        log.info(
            "standings service upstream=%s offline_mode=%s",
            type(_service_singleton.upstream).__name__,
            _service_singleton.is_offline_mode(),
        )
    return _service_singleton


@bp.errorhandler(ValidationError)
def _bad_request(exc: ValidationError):
    return make_error(exc, exc.message, status_code=400)


def _not_found(message: str):
    return make_error("not_found", message, status_code=404)


@bp.get("/countries")
def countries():
    rows = _get_service().get_countries()
    items = [
        with_links(c.to_dict(), {"leagues": url_for(".leagues", countryName=c.name)})
        for c in rows
    ]
    return make_ok(
        with_links({"items": items}, {"self": url_for(".countries")}),
        f"{len(items)} countries",
    )


@bp.get("/leagues")
def leagues():
    country_name = require_param("countryName", request.args.get("countryName"))
    rows = _get_service().get_leagues(country_name)
    if not rows:
        return _not_found(f"No leagues found for country '{country_name}'")
    items = [
        with_links(lg.to_dict(), {"standings": url_for(".league_standings", league_id=lg.id)})
        for lg in rows
    ]
    links = {
        "self": url_for(".leagues", countryName=country_name),
        "countries": url_for(".countries"),
    }
    return make_ok(with_links({"items": items}, links), f"{len(items)} leagues")


@bp.get("/teams")
def teams():
    league_id = require_param("leagueId", request.args.get("leagueId"))
    rows = _get_service().get_teams(league_id)
    if not rows:
        return _not_found(f"No teams found for league '{league_id}'")
    links = {
        "self": url_for(".teams", leagueId=league_id),
        "standings": url_for(".league_standings", league_id=league_id),
    }
    items = [t.to_dict() for t in rows]
    return make_ok(with_links({"items": items}, links), f"{len(items)} teams")


@bp.get("/league/<league_id>")
def league_standings(league_id: str):
    rows = _get_service().get_standings(league_id)
    if not rows:
        return _not_found(f"No standings found for league '{league_id}'")
    items = [
        with_links(
            s.to_dict(),
            {
                "self": url_for(
                    ".team_standing",
                    countryName=s.country_name,
                    leagueName=s.league_name,
                    teamName=s.team_name,
                )
            },
        )
        for s in rows
    ]
    links = {"self": url_for(".league_standings", league_id=league_id)}
    return make_ok(with_links({"items": items}, links), f"{len(items)} standings")


@bp.get("/team")
def team_standing():
    country_name = require_param("countryName", request.args.get("countryName"))
    league_name = require_param("leagueName", request.args.get("leagueName"))
    team_name = require_param("teamName", request.args.get("teamName"))

    srv = _get_service()
    standing = srv.get_team_standing(country_name, league_name, team_name)
    if standing is None:
        return _not_found(
            f"No standing for team '{team_name}' in '{league_name}' ({country_name})"
        )

    payload = standing.to_dict()
    # true when served from the offline tables
    payload["from_cache"] = srv.is_offline_mode()
    links = {
        "self": url_for(
            ".team_standing",
            countryName=country_name,
            leagueName=league_name,
            teamName=team_name,
        ),
        "league-standings": url_for(".league_standings", league_id=standing.league_id),
        "leagues": url_for(".leagues", countryName=country_name),
        "countries": url_for(".countries"),
    }
    return make_ok(with_links(payload, links), "standing found")


@bp.post("/offline-mode")
def set_offline_mode():
    enabled = parse_bool_param("enabled", request.args.get("enabled") or request.form.get("enabled"))
    _get_service().set_offline_mode(enabled)
    message = "Offline mode enabled" if enabled else "Offline mode disabled"
    return make_ok({"offline_mode": enabled}, message)


@bp.get("/offline-mode")
def offline_mode_status():
    return make_ok({"offline_mode": _get_service().is_offline_mode()})
