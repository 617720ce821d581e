from datetime import datetime

from pydantic import BaseModel, Field


class SitemapEntry(BaseModel):
    url: str
    last_modified: datetime
    priority: float = Field(ge=0.0, le=1.0)
