from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sportsteams.core.database import get_db
from sportsteams.core.schemas import UpdateRequest, DeleteRequest, RowCountResponse
from sportsteams.teams.schemas.team_schema import TeamCreate, TeamResponse
from sportsteams.teams.services.team_service import TeamService

router = APIRouter()


@router.post("/", response_model=TeamResponse, status_code=201)
def create_team(payload: TeamCreate, db: Session = Depends(get_db)):
    return TeamService(db).create_team(payload.model_dump())


@router.get("/", response_model=List[TeamResponse])
def get_all_teams(db: Session = Depends(get_db)):
    return TeamService(db).get_all_teams()


@router.get("/{team_id}", response_model=TeamResponse)
def get_team(team_id: int, db: Session = Depends(get_db)):
    return TeamService(db).get_team(team_id)


@router.patch("/", response_model=RowCountResponse)
def update_teams(payload: UpdateRequest, db: Session = Depends(get_db)):
    """e.g. {"filters": {"team_name": "Warrior"}, "values": {"coach_name": "Manoj"}}"""
    return {"rows": TeamService(db).update_teams(payload.filters, payload.values)}


@router.delete("/", response_model=RowCountResponse)
def delete_teams(payload: DeleteRequest, db: Session = Depends(get_db)):
    return {"rows": TeamService(db).delete_teams(payload.filters)}
