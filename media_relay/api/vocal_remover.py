from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from media_relay.config.settings import config
from media_relay.core.errors import ClientInputError, InternalError, RelayError
from media_relay.core.logging import log_error, log_info
from media_relay.models.response import ErrorResponse
from media_relay.services.vocal_remover import VocalRemoverService
from media_relay.utils.forms import VOCAL_UPLOAD_ALIASES, first_present, read_request_fields

router = APIRouter()


@router.post("/vocal-remover", responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def vocal_remover(request: Request):
    """Split an uploaded track into vocals and accompaniment"""

    fields = await read_request_fields(request, config.limits.max_form_part_bytes)
    upload = first_present(fields.uploads, VOCAL_UPLOAD_ALIASES)

    if upload is None:
        log_error(
            request,
            "No file found in upload",
            content_type=request.headers.get("content-type"),
            upload_fields=list(fields.uploads),
        )
        raise ClientInputError(
            'Missing audio file. Expected multipart/form-data with "file" or "audio" field.'
        )

    log_info(
        request,
        f"Forwarding vocal remover request (file: {upload.filename}, size: {upload.size} bytes)"
    )

    try:
        reply = await VocalRemoverService.separate(request, upload)
    except RelayError:
        raise
    except Exception as e:
        log_error(request, f"Vocal remover error: {str(e)}")
        raise InternalError(str(e))

    if reply.is_json:
        return JSONResponse(content=reply.payload)
    return PlainTextResponse(reply.payload)
