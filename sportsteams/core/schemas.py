from typing import Any, Dict
from pydantic import BaseModel, Field


class UpdateRequest(BaseModel):
    """Assign `values` to every row whose columns equal all of `filters`."""
    filters: Dict[str, Any] = Field(default_factory=dict, description="Column equality predicate")
    values: Dict[str, Any] = Field(..., description="Field assignments")


class DeleteRequest(BaseModel):
    filters: Dict[str, Any] = Field(..., description="Column equality predicate")


class RowCountResponse(BaseModel):
    rows: int
