import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .dependencies import get_registry
from .errors import BibleAPIError
from .registry import BibleRegistry, build_registry
from .routers import bible
from .schemas import ErrorResponse, HealthResponse

settings = get_settings()

logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if getattr(app.state, "registry", None) is None:
        app.state.registry = build_registry(settings.bible_assets_path)
    registry = app.state.registry
    logger.info(
        "Bible registry ready: %s canonical books, translations available: %s",
        len(registry.canon),
        ", ".join(registry.store.loader.list_translations()) or "none",
    )
    # warm the default translation so the first reader does not pay for the load
    if settings.default_translation in registry.store.loader.list_translations():
        await registry.store.get(settings.default_translation)
    yield
    logger.info("Bible API shutting down")


app = FastAPI(title="Bible Reader API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BibleAPIError)
async def bible_error_handler(request: Request, exc: BibleAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    body = ErrorResponse(error="Internal server error", code="INTERNAL_ERROR", status_code=500)
    return JSONResponse(status_code=500, content=body.model_dump())


@app.get("/health", response_model=HealthResponse)
def health_check(registry: BibleRegistry = Depends(get_registry)) -> HealthResponse:
    return HealthResponse(status="healthy", cached_translations=len(registry.store))


app.include_router(bible.router)
