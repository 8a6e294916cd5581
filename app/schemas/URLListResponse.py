from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import List


class URLListItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    short_code: str = Field(..., alias="shortCode")
    original: str
    short_url: str = Field(..., alias="shortUrl")
    created: datetime
    clicks: int


class URLListResponse(BaseModel):
    total: int
    urls: List[URLListItem]
