from fastapi import Request

from media_relay.core.errors import UpstreamError
from media_relay.core.logging import log_error, log_info
from media_relay.infra.http import get_http_client
from media_relay.models.internal import VideoPayload, VideoStreamRequest
from media_relay.utils.http_headers import video_fetch_headers

DEFAULT_CONTENT_TYPE = "video/mp4"
ERROR_LOG_CHARS = 200
ERROR_DETAIL_CHARS = 500

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET",
    "Access-Control-Expose-Headers": "Content-Length, Content-Type",
}


class StreamService:
    """Media fetch on behalf of the browser"""

    @staticmethod
    async def fetch(request: Request, video_request: VideoStreamRequest) -> VideoPayload:
        """
        Fetch the media URL with browser-like headers and buffer the body.
        The whole body is held in memory before it is relayed.
        """
        client = get_http_client()
        headers = video_fetch_headers(video_request.url, video_request.range_header)

        response = await client.get(video_request.url, headers=headers)

        if not response.is_success:
            error_text = response.text
            log_error(
                request,
                f"Video download error: {response.status_code} - {error_text[:ERROR_LOG_CHARS]}"
            )
            raise UpstreamError(
                response.status_code,
                f"Video download failed: {response.status_code}",
                details=error_text[:ERROR_DETAIL_CHARS],
            )

        out_headers = {
            "Content-Type": response.headers.get("content-type", DEFAULT_CONTENT_TYPE),
            **CORS_HEADERS,
        }

        # A decoded body no longer matches the upstream length
        content_length = response.headers.get("content-length")
        if content_length and "content-encoding" not in response.headers:
            out_headers["Content-Length"] = content_length

        status_code = 200
        content_range = response.headers.get("content-range")
        if content_range:
            out_headers["Content-Range"] = content_range
            status_code = 206

        body = response.content
        log_info(request, f"Video downloaded ({len(body)} bytes)")
        return VideoPayload(body=body, status_code=status_code, headers=out_headers)
