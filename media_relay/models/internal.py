from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class VideoStreamRequest(BaseModel):
    """Video fetch intent (separated from HTTP concerns)"""
    url: str
    range_header: Optional[str] = None


class AudioUpload(BaseModel):
    """Uploaded audio file held in memory for one request"""
    content: bytes
    filename: str = "audio.wav"
    mime_type: str = "audio/wav"

    @property
    def size(self) -> int:
        return len(self.content)


class TranscriptionRequest(BaseModel):
    audio_base64: str
    language: str = "en"


class UpstreamReply(BaseModel):
    """Body of an upstream answer that may be JSON or plain text"""
    payload: Any
    is_json: bool


class VideoPayload(BaseModel):
    """Buffered video body plus the headers relayed to the client"""
    body: bytes
    status_code: int = 200
    headers: Dict[str, str] = Field(default_factory=dict)
