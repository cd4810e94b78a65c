from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sportsteams.core.database import get_db
from sportsteams.core.schemas import UpdateRequest, DeleteRequest, RowCountResponse
from sportsteams.leagues.schemas.league_schema import LeagueCreate, LeagueResponse
from sportsteams.leagues.services.league_service import LeagueService

router = APIRouter()


@router.post("/", response_model=LeagueResponse, status_code=201)
def create_league(payload: LeagueCreate, db: Session = Depends(get_db)):
    return LeagueService(db).create_league(payload.model_dump())


@router.get("/", response_model=List[LeagueResponse])
def get_all_leagues(db: Session = Depends(get_db)):
    return LeagueService(db).get_all_leagues()


@router.get("/{league_id}", response_model=LeagueResponse)
def get_league(league_id: int, db: Session = Depends(get_db)):
    return LeagueService(db).get_league(league_id)


@router.patch("/", response_model=RowCountResponse)
def update_leagues(payload: UpdateRequest, db: Session = Depends(get_db)):
    return {"rows": LeagueService(db).update_leagues(payload.filters, payload.values)}


@router.delete("/", response_model=RowCountResponse)
def delete_leagues(payload: DeleteRequest, db: Session = Depends(get_db)):
    """Delete leagues matching the predicate; refused while teams or matches still reference them."""
    return {"rows": LeagueService(db).delete_leagues(payload.filters)}
