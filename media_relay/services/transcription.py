from typing import List, Tuple

import httpx
from fastapi import Request

from media_relay.config.settings import config
from media_relay.core.errors import InternalError, UpstreamError
from media_relay.core.logging import log_error, log_info
from media_relay.infra.http import get_http_client
from media_relay.models.internal import TranscriptionRequest

DEFAULT_LANGUAGE = "en"


def build_query(language: str) -> List[Tuple[str, str]]:
    """Fixed ASR flags with the caller's language substituted in"""
    return [
        ("word_timestamps", "false"),
        ("task", "transcribe"),
        ("output", "txt"),
        ("language", language),
        ("encode", "true"),
    ]


class TranscriptionService:
    """Speech to text"""

    @staticmethod
    async def transcribe(request: Request, transcription: TranscriptionRequest) -> str:
        upstream = config.transcriber
        client = get_http_client()

        form = {name: transcription.audio_base64 for name in upstream.forward_fields}

        try:
            response = await client.post(
                upstream.url,
                params=build_query(transcription.language),
                data=form,
                headers={
                    **upstream.credential_headers(),
                    "Content-Type": "application/x-www-form-urlencoded",
                },
            )
        except httpx.HTTPError as e:
            log_error(request, f"{upstream.name} connection error: {str(e)}")
            raise InternalError(str(e), error="Failed to connect to transcription API")

        if not response.is_success:
            error_text = response.text
            log_error(request, f"Transcription failed: {response.status_code} - {error_text}")
            raise UpstreamError(response.status_code, "Transcription API error", message=error_text)

        log_info(request, "Transcription successful")
        return response.text
