from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class DeleteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    short_code: str = Field(..., alias="shortCode")


class CleanupResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    deleted: int
    cutoff_date: datetime = Field(..., alias="cutoffDate")
