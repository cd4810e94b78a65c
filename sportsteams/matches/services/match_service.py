import logging
from datetime import datetime
from sqlalchemy.orm import Session
from sportsteams.matches.models import Match
from sportsteams.leagues.models import League
from sportsteams.teams.models import Team
from sportsteams.scores.models import Score
from sportsteams.core.database import transaction
from sportsteams.core.errors import ValidationError, ReferentialViolation
from sportsteams.core.utils import (
    get_or_raise,
    ensure_reference,
    select_rows,
    assignable_values,
    ensure_no_dependents,
)

logger = logging.getLogger(__name__)


class MatchService:
    DEPENDENTS = [(Score, "match_id")]

    def __init__(self, db: Session):
        self.db = db

    def parse_match_date(self, value):
        """Accept a datetime or an ISO string such as '2025-02-15 20:00:00'."""
        if value is None or isinstance(value, datetime):
            return value
        try:
            return datetime.fromisoformat(value)
        except (ValueError, TypeError):
            raise ValidationError(f"Invalid date format: {value}. Expected an ISO date-time.")

    def check_fixture(self, home_team_id, away_team_id):
        if home_team_id is None or away_team_id is None:
            raise ReferentialViolation("A match needs both a home and an away team")
        if home_team_id == away_team_id:
            raise ValidationError(
                "A team cannot play itself",
                {"home_team_id": home_team_id, "away_team_id": away_team_id},
            )

    def normalize_filters(self, filters: dict) -> dict:
        """Date filters arrive as JSON strings; compare them as datetimes."""
        filters = dict(filters or {})
        if "match_date" in filters:
            filters["match_date"] = self.parse_match_date(filters["match_date"])
        return filters

    def create_match(self, match_data: dict) -> Match:
        """Schedule a fixture between two existing, distinct teams."""
        home_team_id = match_data.get("home_team_id")
        away_team_id = match_data.get("away_team_id")
        self.check_fixture(home_team_id, away_team_id)
        ensure_reference(self.db, League, match_data.get("league_id"), "league_id")
        ensure_reference(self.db, Team, home_team_id, "home_team_id")
        ensure_reference(self.db, Team, away_team_id, "away_team_id")

        match = Match(
            league_id=match_data.get("league_id"),
            home_team_id=home_team_id,
            away_team_id=away_team_id,
            match_date=self.parse_match_date(match_data.get("match_date")),
            venue=match_data.get("venue"),
        )
        with transaction(self.db):
            self.db.add(match)
        self.db.refresh(match)

        logger.info(f"Match created: {match.match_id} ({home_team_id} vs {away_team_id})")
        return match

    def get_match(self, match_id: int) -> Match:
        return get_or_raise(self.db, Match, match_id)

    def get_all_matches(self):
        return self.db.query(Match).order_by(Match.match_id).all()

    def get_matches_between(self, start: datetime, end: datetime):
        # served by idx_match_date
        return (
            self.db.query(Match)
            .filter(Match.match_date >= start, Match.match_date <= end)
            .order_by(Match.match_date, Match.match_id)
            .all()
        )

    def update_matches(self, filters: dict, values: dict) -> int:
        values = assignable_values(Match, values)
        if "match_date" in values:
            values["match_date"] = self.parse_match_date(values["match_date"])
        if "league_id" in values:
            ensure_reference(self.db, League, values["league_id"], "league_id")
        for field in ("home_team_id", "away_team_id"):
            if field in values:
                ensure_reference(self.db, Team, values[field], field)

        query = select_rows(self.db, Match, self.normalize_filters(filters))
        if "home_team_id" in values or "away_team_id" in values:
            for match in query.all():
                self.check_fixture(
                    values.get("home_team_id", match.home_team_id),
                    values.get("away_team_id", match.away_team_id),
                )

        with transaction(self.db):
            updated = query.update(values, synchronize_session=False)
        return updated

    def delete_matches(self, filters: dict) -> int:
        ids = [row.match_id for row in select_rows(self.db, Match, self.normalize_filters(filters)).all()]
        ensure_no_dependents(self.db, ids, self.DEPENDENTS, "match")

        with transaction(self.db):
            deleted = self.db.query(Match).filter(Match.match_id.in_(ids)).delete(synchronize_session=False)
        logger.info(f"Deleted {deleted} match(es)")
        return deleted
