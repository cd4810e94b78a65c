from typing import Optional
from pydantic import BaseModel, Field


class LeagueCreate(BaseModel):
    league_name: str = Field(..., min_length=1, max_length=100)
    country: Optional[str] = Field(None, max_length=50)


class LeagueResponse(BaseModel):
    league_id: int
    league_name: str
    country: Optional[str] = None

    class Config:
        from_attributes = True
