from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sportsteams.core.database import get_db
from sportsteams.reports.services.report_service import ReportService

router = APIRouter()


@router.get("/match-report")
def get_match_report(db: Session = Depends(get_db)):
    """Score events joined to match, teams, league and scorer, oldest match first."""
    return ReportService(db).get_match_report()


@router.get("/player-roster")
def get_player_roster(db: Session = Depends(get_db)):
    return ReportService(db).get_player_roster()


@router.get("/player-summary")
def get_player_summary(db: Session = Depends(get_db)):
    return ReportService(db).get_player_summary()


@router.get("/goals-per-team")
def get_total_goals_per_team(db: Session = Depends(get_db)):
    return ReportService(db).get_total_goals_per_team()


@router.get("/average-age-per-team")
def get_average_age_per_team(db: Session = Depends(get_db)):
    return ReportService(db).get_average_age_per_team()


@router.get("/top-scoring-teams")
def get_teams_with_highest_scoring_event(db: Session = Depends(get_db)):
    return {"teams": ReportService(db).get_teams_with_highest_scoring_event()}


@router.get("/oldest-team-roster")
def get_oldest_team_roster(db: Session = Depends(get_db)):
    return ReportService(db).get_oldest_team_roster()


@router.get("/teams-by-league/{league_name}")
def get_teams_by_league(league_name: str, db: Session = Depends(get_db)):
    """Empty list when no league carries that name."""
    return ReportService(db).get_teams_by_league(league_name)
