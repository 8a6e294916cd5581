from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Dict, Optional


class Statistics(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_clicks: int = Field(..., alias="totalClicks")
    last_access: Optional[datetime] = Field(None, alias="lastAccess")
    referrers: Dict[str, int]
    top_referrer: str = Field(..., alias="topReferrer")


class URLStatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    short_code: str = Field(..., alias="shortCode")
    original: str
    short_url: str = Field(..., alias="shortUrl")
    created: datetime
    statistics: Statistics
