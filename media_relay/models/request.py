from pydantic import BaseModel, Field
from typing import Optional


class DownloadRequest(BaseModel):
    url: Optional[str] = Field(None, description="Social media post or video URL")

    def to_upstream_body(self) -> dict:
        return {"url": self.url}
