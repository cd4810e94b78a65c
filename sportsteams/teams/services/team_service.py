import logging
from sqlalchemy.orm import Session
from sportsteams.teams.models import Team
from sportsteams.leagues.models import League
from sportsteams.players.models import Player
from sportsteams.matches.models import Match
from sportsteams.scores.models import Score
from sportsteams.core.database import transaction
from sportsteams.core.utils import (
    get_or_raise,
    ensure_reference,
    ensure_unique,
    select_rows,
    assignable_values,
    ensure_no_dependents,
)

logger = logging.getLogger(__name__)


class TeamService:
    DEPENDENTS = [
        (Player, "team_id"),
        (Match, "home_team_id"),
        (Match, "away_team_id"),
        (Score, "team_id"),
    ]

    def __init__(self, db: Session):
        self.db = db

    def create_team(self, team_data: dict) -> Team:
        """Insert a team. The league is optional but must exist when given."""
        ensure_unique(self.db, Team, "team_name", team_data["team_name"])
        ensure_reference(self.db, League, team_data.get("league_id"), "league_id")

        team = Team(
            team_name=team_data["team_name"],
            league_id=team_data.get("league_id"),
            coach_name=team_data.get("coach_name"),
            founded_year=team_data.get("founded_year"),
        )
        with transaction(self.db):
            self.db.add(team)
        self.db.refresh(team)

        logger.info(f"Team created: {team.team_id} '{team.team_name}'")
        return team

    def get_team(self, team_id: int) -> Team:
        return get_or_raise(self.db, Team, team_id)

    def get_all_teams(self):
        return self.db.query(Team).order_by(Team.team_id).all()

    def update_teams(self, filters: dict, values: dict) -> int:
        """Assign `values` to every team matching `filters`, e.g. a coach change."""
        values = assignable_values(Team, values)
        if "league_id" in values:
            ensure_reference(self.db, League, values["league_id"], "league_id")

        with transaction(self.db):
            updated = select_rows(self.db, Team, filters).update(values, synchronize_session=False)
        return updated

    def delete_teams(self, filters: dict) -> int:
        ids = [row.team_id for row in select_rows(self.db, Team, filters).all()]
        ensure_no_dependents(self.db, ids, self.DEPENDENTS, "team")

        with transaction(self.db):
            deleted = self.db.query(Team).filter(Team.team_id.in_(ids)).delete(synchronize_session=False)
        logger.info(f"Deleted {deleted} team(s)")
        return deleted
