from typing import List
from fastapi import APIRouter, Depends, UploadFile, File
from sqlalchemy.orm import Session
from sportsteams.core.database import get_db
from sportsteams.core.schemas import UpdateRequest, DeleteRequest, RowCountResponse
from sportsteams.scores.schemas.score_schema import ScoreCreate, ScoreResponse
from sportsteams.scores.services.score_service import ScoreService
from sportsteams.scores.services.score_upload_service import ScoreUploadService

router = APIRouter()


@router.post("/", response_model=ScoreResponse, status_code=201)
def create_score(payload: ScoreCreate, db: Session = Depends(get_db)):
    """Record a score event; negative goals are rejected with 422."""
    return ScoreService(db).create_score(payload.model_dump())


@router.post("/batch", response_model=List[ScoreResponse], status_code=201)
def create_scores(payload: List[ScoreCreate], db: Session = Depends(get_db)):
    return ScoreService(db).create_scores([item.model_dump() for item in payload])


@router.post("/upload-scores-csv/")
async def upload_csv(
    file: UploadFile = File(...),
    db: Session = Depends(get_db)  # Session managed by FastAPI
):
    """Upload CSV and delegate processing to the service layer."""
    upload_service = ScoreUploadService(db)
    return await upload_service.process_csv(file)


@router.get("/", response_model=List[ScoreResponse])
def get_all_scores(db: Session = Depends(get_db)):
    return ScoreService(db).get_all_scores()


@router.get("/{score_id}", response_model=ScoreResponse)
def get_score(score_id: int, db: Session = Depends(get_db)):
    return ScoreService(db).get_score(score_id)


@router.patch("/", response_model=RowCountResponse)
def update_scores(payload: UpdateRequest, db: Session = Depends(get_db)):
    return {"rows": ScoreService(db).update_scores(payload.filters, payload.values)}


@router.delete("/", response_model=RowCountResponse)
def delete_scores(payload: DeleteRequest, db: Session = Depends(get_db)):
    return {"rows": ScoreService(db).delete_scores(payload.filters)}
