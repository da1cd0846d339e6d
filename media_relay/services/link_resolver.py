from typing import Any

from fastapi import Request

from media_relay.config.settings import config
from media_relay.core.errors import UpstreamError
from media_relay.core.logging import log_error, log_info
from media_relay.infra.http import get_http_client
from media_relay.models.request import DownloadRequest


class LinkResolverService:
    """Social-video link resolution"""

    @staticmethod
    async def resolve(request: Request, download_request: DownloadRequest) -> Any:
        """
        Ask the link resolver for the media links of a post.
        The upstream JSON is returned unchanged.
        """
        upstream = config.link_resolver
        client = get_http_client()

        response = await client.post(
            upstream.url,
            json=download_request.to_upstream_body(),
            headers={
                "Content-Type": "application/json",
                **upstream.credential_headers(),
            },
        )

        if not response.is_success:
            error_text = response.text
            log_error(request, f"{upstream.name} error: {response.status_code} - {error_text}")
            raise UpstreamError(response.status_code, f"{upstream.name} error: {error_text}")

        data = response.json()
        log_info(request, f"{upstream.name} response received")
        return data
