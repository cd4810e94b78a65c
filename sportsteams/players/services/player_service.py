import logging
from sqlalchemy.orm import Session
from sportsteams.players.models import Player
from sportsteams.teams.models import Team
from sportsteams.scores.models import Score
from sportsteams.core.database import transaction
from sportsteams.core.utils import (
    get_or_raise,
    ensure_reference,
    select_rows,
    assignable_values,
    ensure_no_dependents,
)

logger = logging.getLogger(__name__)


class PlayerService:
    DEPENDENTS = [(Score, "player_id")]

    def __init__(self, db: Session):
        self.db = db

    def create_player(self, player_data: dict) -> Player:
        """Insert a player; a player may be created without a team."""
        ensure_reference(self.db, Team, player_data.get("team_id"), "team_id")

        player = Player(
            player_name=player_data["player_name"],
            team_id=player_data.get("team_id"),
            position=player_data.get("position"),
            age=player_data.get("age"),
            nationality=player_data.get("nationality"),
        )
        with transaction(self.db):
            self.db.add(player)
        self.db.refresh(player)

        logger.info(f"Player created: {player.player_id} '{player.player_name}'")
        return player

    def get_player(self, player_id: int) -> Player:
        return get_or_raise(self.db, Player, player_id)

    def get_all_players(self):
        return self.db.query(Player).order_by(Player.player_id).all()

    def find_players_by_name(self, player_name: str):
        # served by idx_player_name
        return (
            self.db.query(Player)
            .filter(Player.player_name == player_name)
            .order_by(Player.player_id)
            .all()
        )

    def update_players(self, filters: dict, values: dict) -> int:
        values = assignable_values(Player, values)
        if "team_id" in values:
            ensure_reference(self.db, Team, values["team_id"], "team_id")

        with transaction(self.db):
            updated = select_rows(self.db, Player, filters).update(values, synchronize_session=False)
        return updated

    def increment_ages(self, filters: dict, years: int = 1) -> int:
        """
        Add `years` to the age of every matching player in a single transaction.

        Either every selected row is bumped or, on any failure, none is.
        """
        with transaction(self.db):
            updated = select_rows(self.db, Player, filters).update(
                {Player.age: Player.age + years}, synchronize_session=False
            )
        logger.info(f"Incremented age of {updated} player(s) by {years}")
        return updated

    def delete_players(self, filters: dict) -> int:
        ids = [row.player_id for row in select_rows(self.db, Player, filters).all()]
        ensure_no_dependents(self.db, ids, self.DEPENDENTS, "player")

        with transaction(self.db):
            deleted = self.db.query(Player).filter(Player.player_id.in_(ids)).delete(synchronize_session=False)
        logger.info(f"Deleted {deleted} player(s)")
        return deleted
