from .internal import AudioUpload, TranscriptionRequest, UpstreamReply, VideoPayload, VideoStreamRequest
from .request import DownloadRequest
from .response import ErrorResponse, HealthResponse

__all__ = [
    "AudioUpload",
    "DownloadRequest",
    "ErrorResponse",
    "HealthResponse",
    "TranscriptionRequest",
    "UpstreamReply",
    "VideoPayload",
    "VideoStreamRequest",
]
