import json

from fastapi import Request

from media_relay.config.settings import config
from media_relay.core.errors import UpstreamError
from media_relay.core.logging import log_error, log_info
from media_relay.infra.http import get_http_client
from media_relay.models.internal import AudioUpload, UpstreamReply


class VocalRemoverService:
    """Vocal/accompaniment separation"""

    @staticmethod
    def build_files(upload: AudioUpload, field_names) -> list:
        """Same file under every field name; the client sets the multipart boundary"""
        return [
            (name, (upload.filename, upload.content, upload.mime_type))
            for name in field_names
        ]

    @staticmethod
    async def separate(request: Request, upload: AudioUpload) -> UpstreamReply:
        upstream = config.vocal_remover
        client = get_http_client()

        response = await client.post(
            upstream.url,
            files=VocalRemoverService.build_files(upload, upstream.forward_fields),
            headers=upstream.credential_headers(),
        )

        if not response.is_success:
            error_text = response.text
            log_error(request, f"{upstream.name} error: {response.status_code} - {error_text}")
            raise UpstreamError(response.status_code, f"{upstream.name} error: {error_text}")

        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            log_info(request, f"{upstream.name} response received (JSON)")
            return UpstreamReply(payload=response.json(), is_json=True)

        text = response.text
        log_info(request, f"{upstream.name} response received (text)")
        # Some answers are JSON sent with a text content type
        try:
            return UpstreamReply(payload=json.loads(text), is_json=True)
        except ValueError:
            return UpstreamReply(payload=text, is_json=False)
