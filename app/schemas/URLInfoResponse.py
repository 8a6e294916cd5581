from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

# Response DTOs
class URLInfoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    original: str
    short_url: str = Field(..., alias="shortUrl")
    short_code: str = Field(..., alias="shortCode")
    created: datetime
