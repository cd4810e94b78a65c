import logging
import pandas as pd
from io import StringIO
from sqlalchemy.orm import Session
from fastapi import UploadFile
from sportsteams.core.errors import ValidationError
from sportsteams.scores.services.score_service import ScoreService

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["match_id", "team_id", "goals_scored"]


class ScoreUploadService:

    def __init__(self, db: Session):
        self.db = db
        self.score_service = ScoreService(db)

    def safe_int(self, value, field: str, line: int):
        """Blank cells become None; anything else must be a whole number."""
        if value is None:
            return None
        if isinstance(value, str) and not value.strip():
            return None
        if pd.isna(value):
            return None
        try:
            number = float(value)
        except (ValueError, TypeError):
            raise ValidationError(f"Row {line}: '{value}' is not a number for {field}", {"row": line, "field": field})
        if not number.is_integer():
            raise ValidationError(f"Row {line}: {field} must be a whole number", {"row": line, "field": field})
        return int(number)

    def parse_csv(self, text: str) -> list:
        """Turn CSV text into score rows ready for ScoreService.create_scores."""
        try:
            df = pd.read_csv(StringIO(text))
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise ValidationError(f"Could not read CSV: {e}")

        missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
        if missing:
            raise ValidationError(f"CSV is missing columns: {', '.join(missing)}", {"missing": missing})

        rows = []
        for index, row in df.iterrows():
            line = index + 2  # header is line 1
            score_data = {
                "match_id": self.safe_int(row.get("match_id"), "match_id", line),
                "team_id": self.safe_int(row.get("team_id"), "team_id", line),
                "goals_scored": self.safe_int(row.get("goals_scored"), "goals_scored", line),
                "player_id": self.safe_int(row.get("player_id"), "player_id", line),
                "minute_scored": self.safe_int(row.get("minute_scored"), "minute_scored", line),
            }
            for field in ("match_id", "team_id"):
                if score_data[field] is None:
                    raise ValidationError(f"Row {line}: {field} is required", {"row": line, "field": field})
            rows.append(score_data)
        return rows

    async def process_csv(self, file: UploadFile):
        """Reads the CSV and inserts every score event, or none of them."""
        contents = await file.read()
        try:
            text = contents.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValidationError(f"Could not read CSV: {e}")
        rows = self.parse_csv(text)
        scores = self.score_service.create_scores(rows)

        logger.info(f"CSV '{file.filename}' uploaded: {len(scores)} score event(s)")
        return {"message": "CSV uploaded and processed successfully", "rows": len(scores)}
