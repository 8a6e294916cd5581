from datetime import datetime, timezone
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class URLRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    original: str
    created: datetime = Field(default_factory=utcnow)
    short_code: str = Field(..., alias="shortCode")

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, v):
        return _as_utc(v)


class StatsRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    clicks: int = Field(0, ge=0)
    last_access: Optional[datetime] = Field(None, alias="lastAccess")
    referrers: Dict[str, int] = Field(default_factory=dict)

    @field_validator("last_access")
    @classmethod
    def last_access_as_utc(cls, v):
        return _as_utc(v)


# Shape of the persisted JSON document
class Database(BaseModel):
    urls: Dict[str, URLRecord] = Field(default_factory=dict)
    stats: Dict[str, StatsRecord] = Field(default_factory=dict)
