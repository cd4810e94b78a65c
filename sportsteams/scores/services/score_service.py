import logging
from sqlalchemy.orm import Session
from sportsteams.scores.models import Score
from sportsteams.matches.models import Match
from sportsteams.teams.models import Team
from sportsteams.players.models import Player
from sportsteams.core.database import transaction
from sportsteams.core.errors import ValidationError
from sportsteams.core.utils import (
    get_or_raise,
    ensure_reference,
    select_rows,
    assignable_values,
)

logger = logging.getLogger(__name__)


class ScoreService:
    def __init__(self, db: Session):
        self.db = db

    def validate_goals(self, goals_scored):
        """Row admission check: a score event can never carry negative goals."""
        if goals_scored is not None and goals_scored < 0:
            logger.error(f"Rejected score event with goals_scored={goals_scored}")
            raise ValidationError("Goals cannot be negative", {"goals_scored": goals_scored})

    def build_score(self, score_data: dict) -> Score:
        goals_scored = score_data.get("goals_scored")
        if goals_scored is None:
            goals_scored = 0
        self.validate_goals(goals_scored)
        ensure_reference(self.db, Match, score_data.get("match_id"), "match_id")
        ensure_reference(self.db, Team, score_data.get("team_id"), "team_id")
        ensure_reference(self.db, Player, score_data.get("player_id"), "player_id")

        return Score(
            match_id=score_data.get("match_id"),
            team_id=score_data.get("team_id"),
            goals_scored=goals_scored,
            player_id=score_data.get("player_id"),
            minute_scored=score_data.get("minute_scored"),
        )

    def create_score(self, score_data: dict) -> Score:
        score = self.build_score(score_data)
        with transaction(self.db):
            self.db.add(score)
        self.db.refresh(score)

        logger.info(f"Score event created: {score.score_id} (match {score.match_id}, team {score.team_id})")
        return score

    def create_scores(self, rows: list) -> list:
        """Insert a batch of score events all-or-nothing: one bad row rejects the batch."""
        scores = [self.build_score(row) for row in rows]
        with transaction(self.db):
            self.db.add_all(scores)
        for score in scores:
            self.db.refresh(score)

        logger.info(f"Inserted {len(scores)} score event(s)")
        return scores

    def get_score(self, score_id: int) -> Score:
        return get_or_raise(self.db, Score, score_id)

    def get_all_scores(self):
        return self.db.query(Score).order_by(Score.score_id).all()

    def count_scores(self) -> int:
        return self.db.query(Score).count()

    def update_scores(self, filters: dict, values: dict) -> int:
        values = assignable_values(Score, values)
        if "goals_scored" in values:
            if values["goals_scored"] is None:
                raise ValidationError("goals_scored cannot be unset")
            self.validate_goals(values["goals_scored"])
        ensure_reference(self.db, Match, values.get("match_id"), "match_id")
        ensure_reference(self.db, Team, values.get("team_id"), "team_id")
        ensure_reference(self.db, Player, values.get("player_id"), "player_id")

        with transaction(self.db):
            updated = select_rows(self.db, Score, filters).update(values, synchronize_session=False)
        return updated

    def delete_scores(self, filters: dict) -> int:
        # nothing references a score event
        with transaction(self.db):
            deleted = select_rows(self.db, Score, filters).delete(synchronize_session=False)
        logger.info(f"Deleted {deleted} score event(s)")
        return deleted
