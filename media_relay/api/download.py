from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from media_relay.config.settings import config
from media_relay.core.errors import ClientInputError, InternalError, RelayError
from media_relay.core.logging import log_error, log_info
from media_relay.models.request import DownloadRequest
from media_relay.models.response import ErrorResponse
from media_relay.services.link_resolver import LinkResolverService
from media_relay.utils.forms import read_request_fields
from media_relay.utils.url import safe_url_for_log

router = APIRouter()


@router.post("/download", responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def download_link(request: Request):
    """Resolve the downloadable media links of a social post"""

    fields = await read_request_fields(request, config.limits.max_form_part_bytes)
    try:
        download_request = DownloadRequest.model_validate({"url": fields.values.get("url")})
    except ValidationError:
        raise ClientInputError("Invalid field: url")

    if not download_request.url:
        raise ClientInputError("Missing required field: url")

    log_info(request, f"Fetching download link for: {safe_url_for_log(download_request.url)}")

    try:
        data = await LinkResolverService.resolve(request, download_request)
    except RelayError:
        raise
    except Exception as e:
        log_error(request, f"Download link fetch error: {str(e)}")
        raise InternalError(str(e))

    return JSONResponse(content=data)
