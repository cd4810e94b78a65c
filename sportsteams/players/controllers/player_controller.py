from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sportsteams.core.database import get_db
from sportsteams.core.schemas import UpdateRequest, DeleteRequest, RowCountResponse
from sportsteams.players.schemas.player_schema import PlayerCreate, PlayerResponse, AgeIncrementRequest
from sportsteams.players.services.player_service import PlayerService

router = APIRouter()


@router.post("/", response_model=PlayerResponse, status_code=201)
def create_player(payload: PlayerCreate, db: Session = Depends(get_db)):
    return PlayerService(db).create_player(payload.model_dump())


@router.get("/", response_model=List[PlayerResponse])
def get_players(player_name: Optional[str] = None, db: Session = Depends(get_db)):
    """All players, or only those with the given name."""
    service = PlayerService(db)
    if player_name is not None:
        return service.find_players_by_name(player_name)
    return service.get_all_players()


@router.get("/{player_id}", response_model=PlayerResponse)
def get_player(player_id: int, db: Session = Depends(get_db)):
    return PlayerService(db).get_player(player_id)


@router.patch("/", response_model=RowCountResponse)
def update_players(payload: UpdateRequest, db: Session = Depends(get_db)):
    return {"rows": PlayerService(db).update_players(payload.filters, payload.values)}


@router.post("/increment-age", response_model=RowCountResponse)
def increment_ages(payload: AgeIncrementRequest, db: Session = Depends(get_db)):
    return {"rows": PlayerService(db).increment_ages(payload.filters, payload.years)}


@router.delete("/", response_model=RowCountResponse)
def delete_players(payload: DeleteRequest, db: Session = Depends(get_db)):
    return {"rows": PlayerService(db).delete_players(payload.filters)}
