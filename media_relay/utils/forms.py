"""
Request body reading and field-name alias lookup.

Browsers and scripts post audio under several names, so every route keeps an
ordered tuple of accepted names and resolves it once per request.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

from fastapi import Request
from starlette.exceptions import HTTPException
from starlette.datastructures import UploadFile

from media_relay.core.errors import ClientInputError
from media_relay.core.logging import log_debug
from media_relay.models.internal import AudioUpload
from media_relay.utils.filename import sanitize_filename

# Accepted inbound names, in lookup order
VOCAL_UPLOAD_ALIASES = ("file", "audio", "audio_file", "upload")
TRANSCRIBE_UPLOAD_ALIASES = ("file", "audio")
TRANSCRIBE_TEXT_ALIASES = ("audio", "file", "audio_data", "data")

DEFAULT_FILENAME = "audio.wav"
DEFAULT_MIME_TYPE = "audio/wav"


@dataclass
class RequestFields:
    """Parsed body: plain values and in-memory uploads keyed by field name"""
    values: Dict[str, Any] = field(default_factory=dict)
    uploads: Dict[str, AudioUpload] = field(default_factory=dict)


def first_present(mapping: Dict[str, Any], aliases: Iterable[str]) -> Optional[Any]:
    """Return the value of the first alias present with a non-empty value"""
    for alias in aliases:
        value = mapping.get(alias)
        if value:
            return value
    return None


async def _to_audio_upload(upload: UploadFile) -> AudioUpload:
    content = await upload.read()
    return AudioUpload(
        content=content,
        filename=sanitize_filename(upload.filename, default=DEFAULT_FILENAME),
        mime_type=upload.content_type or DEFAULT_MIME_TYPE,
    )


async def read_request_fields(request: Request, max_part_size: int) -> RequestFields:
    """
    Read a JSON, URL-encoded or multipart body into RequestFields.
    Other content types yield no fields.
    """
    content_type = request.headers.get("content-type", "").lower()
    fields = RequestFields()

    if "application/json" in content_type:
        body = await request.body()
        if not body:
            return fields
        try:
            data = await request.json()
        except ValueError:
            raise ClientInputError("Malformed JSON body")
        if isinstance(data, dict):
            fields.values.update(data)
        return fields

    if "multipart/form-data" not in content_type and "application/x-www-form-urlencoded" not in content_type:
        return fields

    try:
        async with request.form(max_part_size=max_part_size) as form:
            for name, value in form.multi_items():
                if isinstance(value, UploadFile):
                    # First file per field name wins
                    if name not in fields.uploads:
                        fields.uploads[name] = await _to_audio_upload(value)
                else:
                    fields.values[name] = value
    except HTTPException as e:
        # Starlette reports unparsable multipart bodies this way
        raise ClientInputError("Malformed form body", message=str(e.detail))

    log_debug(request, f"Form fields: values={sorted(fields.values)}, uploads={sorted(fields.uploads)}")
    return fields
