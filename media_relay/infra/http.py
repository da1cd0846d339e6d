from typing import Optional

import httpx
from rich.console import Console

from media_relay.config.settings import config
from media_relay.core.state import state

console = Console()


def build_http_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Create the pooled client used for every upstream call"""
    return httpx.AsyncClient(
        follow_redirects=config.http.follow_redirects,
        timeout=config.http.timeout_seconds,
        transport=transport,
    )


async def init_http_client() -> None:
    """Create the shared outbound client unless one is already installed"""
    if state.http_client is None:
        state.http_client = build_http_client()
        console.print("[green]✓ Outbound HTTP client ready[/green]")


def get_http_client() -> httpx.AsyncClient:
    """Get the shared outbound client, creating it on first use"""
    if state.http_client is None:
        state.http_client = build_http_client()
    return state.http_client


async def close_http_client() -> None:
    """Close the shared outbound client"""
    if state.http_client is not None:
        await state.http_client.aclose()
        state.http_client = None
        console.print("[dim]✓ Outbound HTTP client closed[/dim]")
