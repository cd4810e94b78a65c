from typing import Optional
from pydantic import BaseModel, Field


class TeamCreate(BaseModel):
    team_name: str = Field(..., min_length=1, max_length=100)
    league_id: Optional[int] = Field(None, description="Owning league (optional)")
    coach_name: Optional[str] = Field(None, max_length=100)
    founded_year: Optional[int] = None


class TeamResponse(BaseModel):
    team_id: int
    team_name: str
    league_id: Optional[int] = None
    coach_name: Optional[str] = None
    founded_year: Optional[int] = None

    class Config:
        from_attributes = True
