"""
Fixed values shared by the upstream adapter, the resolver and the HTTP layer.
"""

# Upstream actions (apifootball `action=` query values)
ACTION_COUNTRIES = "get_countries"
ACTION_LEAGUES = "get_leagues"
ACTION_STANDINGS = "get_standings"
ACTION_TEAMS = "get_teams"

# Country name -> upstream country_id, keyed by lowercase short name in
# English, Spanish, German, French and Italian.
COUNTRY_IDS = {
    # England
    "england": "41",
    "inglaterra": "41",
    "angleterre": "41",
    "inghilterra": "41",
    # Spain
    "spain": "6",
    "españa": "6",
    "espana": "6",
    "spanien": "6",
    "espagne": "6",
    "spagna": "6",
    # Germany
    "germany": "5",
    "alemania": "5",
    "deutschland": "5",
    "allemagne": "5",
    "germania": "5",
    # France
    "france": "3",
    "francia": "3",
    "frankreich": "3",
    # Italy
    "italy": "4",
    "italia": "4",
    "italien": "4",
    "italie": "4",
}
DEFAULT_COUNTRY_ID = "41"  # unknown names resolve to England

# Single key for the parameterless countries lookup
COUNTRIES_CACHE_KEY = "all"

# Flask Development Server
DEV_SERVER_HOST = "0.0.0.0"  # Bind to all interfaces
DEV_SERVER_PORT = 5000  # Standard development port


def country_id_for(name: str | None) -> str | None:
    """Return the upstream country id for a human country name, or None if unmapped."""
    if not name:
        return None
    return COUNTRY_IDS.get(name.strip().lower())
