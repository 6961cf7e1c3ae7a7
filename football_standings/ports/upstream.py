from typing import List

from ..models import Country, League, Standing, Team


class UpstreamPort:
    """Source of live football data. Implementations return [] instead of raising."""

    def fetch_countries(self) -> List[Country]: ...

    def fetch_leagues(self, country_name: str) -> List[League]: ...

    def fetch_standings(self, league_id: str) -> List[Standing]: ...

    def fetch_teams(self, league_id: str) -> List[Team]: ...
