import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from rich.console import Console

from media_relay.api import download, health, stream, transcribe, vocal_remover
from media_relay.config.settings import config
from media_relay.core.errors import RelayError
from media_relay.core.logging import log_warning, logger, setup_logging
from media_relay.infra.http import close_http_client, init_http_client
from media_relay.models.response import ErrorResponse

console = Console()

app = FastAPI(
    title=config.api.title,
    description=config.api.description,
    version=config.api.version,
    docs_url="/docs" if config.api.debug else None,
    redoc_url=None
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.api.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Length", "Content-Type", "Content-Range", "X-Request-ID"],
)


@app.middleware("http")
async def assign_request_id(request: Request, call_next):
    request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
    request.state.request_id = request_id
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError):
    return JSONResponse(status_code=exc.status_code, content=exc.payload)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    log_warning(request, f"Rejected request: {exc.errors()}")
    body = ErrorResponse(error="Invalid request", message=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))


# Routes
app.include_router(health.router, tags=["Health"])
app.include_router(download.router, prefix="/api", tags=["Download"])
app.include_router(stream.router, prefix="/api", tags=["Stream"])
app.include_router(vocal_remover.router, prefix="/api", tags=["Vocal Remover"])
app.include_router(transcribe.router, prefix="/api", tags=["Transcribe"])


def print_banner() -> None:
    console.print(f"[bold green]Media relay running on http://localhost:{config.server.port}[/bold green]")
    console.print(f"[dim]CORS origins: {', '.join(config.api.cors_origins)}[/dim]")
    console.print("Available endpoints:")
    console.print("  POST /api/download        - social video link resolver")
    console.print("  GET  /api/video-download  - media fetch (bypass CORS)")
    console.print("  POST /api/vocal-remover   - vocal remover")
    console.print("  POST /api/transcribe      - speech recognition")
    console.print(f"  GET  /                    - {config.static.index_file}")

    for upstream in (config.link_resolver, config.vocal_remover, config.transcriber):
        if not upstream.key:
            logger.warning(f"No API key configured for {upstream.name} ({upstream.host})")


@app.on_event("startup")
async def startup_event():
    setup_logging(config.logging)
    await init_http_client()
    print_banner()


@app.on_event("shutdown")
async def shutdown_event():
    await close_http_client()
