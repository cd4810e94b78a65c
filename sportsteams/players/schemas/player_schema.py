from typing import Optional
from pydantic import BaseModel, Field


class PlayerCreate(BaseModel):
    player_name: str = Field(..., min_length=1, max_length=100)
    team_id: Optional[int] = Field(None, description="Current team (optional)")
    position: Optional[str] = Field(None, max_length=50)
    age: Optional[int] = None
    nationality: Optional[str] = Field(None, max_length=50)


class PlayerResponse(BaseModel):
    player_id: int
    player_name: str
    team_id: Optional[int] = None
    position: Optional[str] = None
    age: Optional[int] = None
    nationality: Optional[str] = None

    class Config:
        from_attributes = True


class AgeIncrementRequest(BaseModel):
    filters: dict = Field(default_factory=dict, description="Column equality predicate, e.g. {'nationality': 'Indian'}")
    years: int = 1
