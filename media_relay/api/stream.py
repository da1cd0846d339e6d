from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import Response

from media_relay.core.errors import ClientInputError, InternalError, RelayError
from media_relay.core.logging import log_error, log_info
from media_relay.models.internal import VideoStreamRequest
from media_relay.models.response import ErrorResponse
from media_relay.services.stream import StreamService
from media_relay.utils.url import safe_url_for_log

router = APIRouter()


@router.get("/video-download", responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def video_download(request: Request, url: Optional[str] = Query(None, description="Media URL to fetch")):
    """Fetch a media file for the browser (Range transparent for YouTube CDNs)"""

    if not url:
        raise ClientInputError("Missing required query parameter: url")

    video_request = VideoStreamRequest(url=url, range_header=request.headers.get("range"))
    log_info(request, f"Downloading video from: {safe_url_for_log(url)}")

    try:
        payload = await StreamService.fetch(request, video_request)
    except RelayError:
        raise
    except Exception as e:
        log_error(request, f"Video download error: {str(e)}")
        raise InternalError(str(e))

    return Response(
        content=payload.body,
        status_code=payload.status_code,
        headers=payload.headers,
    )
