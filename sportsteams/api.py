from fastapi import APIRouter
from sportsteams.leagues.controllers.league_controller import router as league_router
from sportsteams.teams.controllers.team_controller import router as team_router
from sportsteams.players.controllers.player_controller import router as player_router
from sportsteams.matches.controllers.match_controller import router as match_router
from sportsteams.scores.controllers.score_controller import router as score_router
from sportsteams.reports.controllers.report_controller import router as report_router

api_router = APIRouter()

api_router.include_router(league_router, prefix="/league", tags=["league"])
api_router.include_router(team_router, prefix="/team", tags=["team"])
api_router.include_router(player_router, prefix="/player", tags=["player"])
api_router.include_router(match_router, prefix="/match", tags=["match"])
api_router.include_router(score_router, prefix="/score", tags=["score"])
api_router.include_router(report_router, prefix="/report", tags=["report"])
