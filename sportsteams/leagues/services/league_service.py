import logging
from sqlalchemy.orm import Session
from sportsteams.leagues.models import League
from sportsteams.teams.models import Team
from sportsteams.matches.models import Match
from sportsteams.core.database import transaction
from sportsteams.core.utils import (
    get_or_raise,
    ensure_unique,
    select_rows,
    assignable_values,
    ensure_no_dependents,
)

logger = logging.getLogger(__name__)


class LeagueService:
    DEPENDENTS = [(Team, "league_id"), (Match, "league_id")]

    def __init__(self, db: Session):
        self.db = db

    def create_league(self, league_data: dict) -> League:
        """Insert a league; its name must be unused."""
        ensure_unique(self.db, League, "league_name", league_data["league_name"])

        league = League(
            league_name=league_data["league_name"],
            country=league_data.get("country"),
        )
        with transaction(self.db):
            self.db.add(league)
        self.db.refresh(league)

        logger.info(f"League created: {league.league_id} '{league.league_name}'")
        return league

    def get_league(self, league_id: int) -> League:
        return get_or_raise(self.db, League, league_id)

    def get_league_by_name(self, league_name: str):
        return self.db.query(League).filter(League.league_name == league_name).first()

    def get_all_leagues(self):
        return self.db.query(League).order_by(League.league_id).all()

    def update_leagues(self, filters: dict, values: dict) -> int:
        values = assignable_values(League, values)
        with transaction(self.db):
            updated = select_rows(self.db, League, filters).update(values, synchronize_session=False)
        return updated

    def delete_leagues(self, filters: dict) -> int:
        """Delete matching leagues; refused while a team or match still belongs to one of them."""
        ids = [row.league_id for row in select_rows(self.db, League, filters).all()]
        ensure_no_dependents(self.db, ids, self.DEPENDENTS, "league")

        with transaction(self.db):
            deleted = self.db.query(League).filter(League.league_id.in_(ids)).delete(synchronize_session=False)
        logger.info(f"Deleted {deleted} league(s)")
        return deleted
