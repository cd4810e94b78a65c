from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sportsteams.core.database import get_db
from sportsteams.core.schemas import UpdateRequest, DeleteRequest, RowCountResponse
from sportsteams.matches.schemas.match_schema import MatchCreate, MatchResponse
from sportsteams.matches.services.match_service import MatchService

router = APIRouter()


@router.post("/", response_model=MatchResponse, status_code=201)
def create_match(payload: MatchCreate, db: Session = Depends(get_db)):
    return MatchService(db).create_match(payload.model_dump())


@router.get("/", response_model=List[MatchResponse])
def get_matches(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    db: Session = Depends(get_db),
):
    service = MatchService(db)
    if start is not None and end is not None:
        return service.get_matches_between(start, end)
    return service.get_all_matches()


@router.get("/{match_id}", response_model=MatchResponse)
def get_match(match_id: int, db: Session = Depends(get_db)):
    return MatchService(db).get_match(match_id)


@router.patch("/", response_model=RowCountResponse)
def update_matches(payload: UpdateRequest, db: Session = Depends(get_db)):
    return {"rows": MatchService(db).update_matches(payload.filters, payload.values)}


@router.delete("/", response_model=RowCountResponse)
def delete_matches(payload: DeleteRequest, db: Session = Depends(get_db)):
    return {"rows": MatchService(db).delete_matches(payload.filters)}
