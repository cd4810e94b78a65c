from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class MatchCreate(BaseModel):
    league_id: Optional[int] = None
    home_team_id: int
    away_team_id: int
    match_date: Optional[datetime] = None
    venue: Optional[str] = Field(None, max_length=100)


class MatchResponse(BaseModel):
    match_id: int
    league_id: Optional[int] = None
    home_team_id: int
    away_team_id: int
    match_date: Optional[datetime] = None
    venue: Optional[str] = None

    class Config:
        from_attributes = True
