from sqlalchemy.orm import Session, aliased
from sqlalchemy import func, select
from sportsteams.leagues.models import League
from sportsteams.teams.models import Team
from sportsteams.players.models import Player
from sportsteams.matches.models import Match
from sportsteams.scores.models import Score
from sportsteams.reports.models.player_summary_model import PlayerSummary, player_summary_select


class ReportService:
    def __init__(self, db: Session):
        self.db = db

    def get_match_report(self):
        """Every score event with its match, both teams, league and (possibly missing) scorer."""
        HomeTeam = aliased(Team)
        AwayTeam = aliased(Team)

        results = (
            self.db.query(
                Match.match_id,
                League.league_name,
                HomeTeam.team_name.label("home_team"),
                AwayTeam.team_name.label("away_team"),
                Score.goals_scored,
                Player.player_name.label("scorer"),
                Score.minute_scored,
            )
            .select_from(Score)
            .join(Match, Score.match_id == Match.match_id)
            .join(HomeTeam, Match.home_team_id == HomeTeam.team_id)
            .join(AwayTeam, Match.away_team_id == AwayTeam.team_id)
            .outerjoin(Player, Score.player_id == Player.player_id)
            .join(League, Match.league_id == League.league_id)
            .order_by(Match.match_date, Score.score_id)
            .all()
        )

        return [
            {
                "match_id": row.match_id,
                "league_name": row.league_name,
                "home_team": row.home_team,
                "away_team": row.away_team,
                "goals_scored": row.goals_scored,
                "scorer": row.scorer,
                "minute_scored": row.minute_scored,
            }
            for row in results
        ]

    def get_player_roster(self):
        """Roster summary; players without a team (or whose team has no league) are left out."""
        query = player_summary_select().order_by(Player.player_id)
        return [dict(row._mapping) for row in self.db.execute(query)]

    def get_player_summary(self):
        """Read the standing player_summary view."""
        query = PlayerSummary.select().order_by(PlayerSummary.c.player_id)
        return [dict(row._mapping) for row in self.db.execute(query)]

    def get_total_goals_per_team(self):
        # outer join so a team whose score events were all deleted still reports 0
        results = (
            self.db.query(
                Team.team_name,
                func.coalesce(func.sum(Score.goals_scored), 0).label("total_goals"),
            )
            .outerjoin(Score, Score.team_id == Team.team_id)
            .group_by(Team.team_id, Team.team_name)
            .order_by(Team.team_id)
            .all()
        )
        return [{"team_name": row.team_name, "total_goals": int(row.total_goals)} for row in results]

    def get_average_age_per_team(self):
        results = (
            self.db.query(Team.team_name, func.avg(Player.age).label("avg_age"))
            .join(Team, Player.team_id == Team.team_id)
            .group_by(Team.team_id, Team.team_name)
            .order_by(Team.team_id)
            .all()
        )
        return [
            {
                "team_name": row.team_name,
                "avg_age": float(row.avg_age) if row.avg_age is not None else None,
            }
            for row in results
        ]

    def get_teams_with_highest_scoring_event(self):
        """All teams owning a score event equal to the largest goals_scored seen; ties included."""
        max_goals = select(func.max(Score.goals_scored)).scalar_subquery()
        top_team_ids = select(Score.team_id).where(Score.goals_scored == max_goals)

        results = (
            self.db.query(Team.team_name)
            .filter(Team.team_id.in_(top_team_ids))
            .order_by(Team.team_id)
            .all()
        )
        return [row.team_name for row in results]

    def get_oldest_team_roster(self):
        """
        Players of the team with the highest average player age.

        When several teams share the maximum average, the one with the lowest team_id wins.
        """
        oldest_team_id = (
            self.db.query(Player.team_id)
            .filter(Player.team_id.isnot(None), Player.age.isnot(None))
            .group_by(Player.team_id)
            .order_by(func.avg(Player.age).desc(), Player.team_id)
            .limit(1)
            .scalar()
        )
        if oldest_team_id is None:
            return []

        results = (
            self.db.query(Player.player_name, Player.age)
            .filter(Player.team_id == oldest_team_id)
            .order_by(Player.player_id)
            .all()
        )
        return [{"player_name": row.player_name, "age": row.age} for row in results]

    def get_teams_by_league(self, league_name: str):
        """Teams of the named league; an unknown league yields an empty list, not an error."""
        results = (
            self.db.query(Team.team_name, Team.coach_name, Team.founded_year)
            .join(League, Team.league_id == League.league_id)
            .filter(League.league_name == league_name)
            .order_by(Team.team_id)
            .all()
        )
        return [
            {
                "team_name": row.team_name,
                "coach_name": row.coach_name,
                "founded_year": row.founded_year,
            }
            for row in results
        ]
