from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from media_relay.config.settings import config
from media_relay.core.errors import RelayError
from media_relay.models.response import HealthResponse

router = APIRouter()


@router.get("/", include_in_schema=False)
async def root():
    """Serve the front-end entry file"""
    index_file = Path(config.static.index_file)
    if not index_file.is_file():
        raise RelayError("Front-end entry file not found", status_code=404)
    return FileResponse(index_file)


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Lightweight health check"""
    return HealthResponse(status="ok")
