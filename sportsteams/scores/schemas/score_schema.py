from typing import Optional
from pydantic import BaseModel


class ScoreCreate(BaseModel):
    match_id: int
    team_id: int
    # negative counts are rejected by ScoreService
    goals_scored: int = 0
    player_id: Optional[int] = None
    minute_scored: Optional[int] = None


class ScoreResponse(BaseModel):
    score_id: int
    match_id: int
    team_id: int
    goals_scored: int
    player_id: Optional[int] = None
    minute_scored: Optional[int] = None

    class Config:
        from_attributes = True
