from sqlalchemy import Table, Column, Integer, String, MetaData, select, text
from sportsteams.players.models.player_model import Player
from sportsteams.teams.models.team_model import Team
from sportsteams.leagues.models.leagues_models import League

# Kept out of Base.metadata so create_all never builds it as a table
view_metadata = MetaData()

PlayerSummary = Table(
    "player_summary",
    view_metadata,
    Column("player_id", Integer, primary_key=True),
    Column("player_name", String(100)),
    Column("position", String(50)),
    Column("age", Integer),
    Column("nationality", String(50)),
    Column("team_name", String(100)),
    Column("league_name", String(100)),
)


def player_summary_select():
    """Players joined to their team and the team's league; teamless players drop out."""
    return (
        select(
            Player.player_id,
            Player.player_name,
            Player.position,
            Player.age,
            Player.nationality,
            Team.team_name,
            League.league_name,
        )
        .join(Team, Player.team_id == Team.team_id)
        .join(League, Team.league_id == League.league_id)
    )


def create_player_summary_view(conn):
    definition = player_summary_select().compile(
        dialect=conn.dialect, compile_kwargs={"literal_binds": True}
    )
    if conn.dialect.name == "sqlite":
        ddl = f"CREATE VIEW IF NOT EXISTS player_summary AS {definition}"
    else:
        ddl = f"CREATE OR REPLACE VIEW player_summary AS {definition}"
    conn.execute(text(ddl))
