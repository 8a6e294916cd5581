from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

# Request DTOs
class URLCreateRequest(BaseModel):
    # Format checks happen in URLService so they surface as 400 ValidationError
    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = None
    custom_code: Optional[str] = Field(None, alias="customCode")
