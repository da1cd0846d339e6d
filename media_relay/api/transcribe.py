import base64
from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import PlainTextResponse

from media_relay.config.settings import config
from media_relay.core.errors import ClientInputError, InternalError, RelayError
from media_relay.core.logging import log_error, log_info
from media_relay.models.internal import TranscriptionRequest
from media_relay.models.response import ErrorResponse
from media_relay.services.transcription import DEFAULT_LANGUAGE, TranscriptionService
from media_relay.utils.forms import (
    TRANSCRIBE_TEXT_ALIASES,
    TRANSCRIBE_UPLOAD_ALIASES,
    first_present,
    read_request_fields,
)

router = APIRouter()


@router.post(
    "/transcribe",
    response_class=PlainTextResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def transcribe(request: Request, language: Optional[str] = Query(None, description="Spoken language code")):
    """
    Transcribe audio to plain text.
    Accepts a file upload or base64 audio in a form or JSON body.
    """
    language = language or DEFAULT_LANGUAGE

    fields = await read_request_fields(request, config.limits.max_form_part_bytes)
    upload = first_present(fields.uploads, TRANSCRIBE_UPLOAD_ALIASES)

    # An empty file counts as no audio
    if upload is not None and upload.content:
        audio_base64 = base64.b64encode(upload.content).decode("ascii")
    else:
        value = first_present(fields.values, TRANSCRIBE_TEXT_ALIASES)
        audio_base64 = value if isinstance(value, str) else None

    if not audio_base64:
        raise ClientInputError(
            'Missing audio data. Expected multipart/form-data with "file" or "audio" field, '
            'or base64 audio in body.'
        )

    log_info(request, f"Forwarding transcription request (language: {language})")

    try:
        text = await TranscriptionService.transcribe(
            request,
            TranscriptionRequest(audio_base64=audio_base64, language=language),
        )
    except RelayError:
        raise
    except Exception as e:
        log_error(request, f"Transcription error: {str(e)}")
        raise InternalError(str(e))

    return PlainTextResponse(text)
