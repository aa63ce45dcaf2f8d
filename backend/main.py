import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import get_settings
from api.dependencies import get_content_safety_config
from api.errors import register_exception_handlers
from api.routes import content_safety

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting ComunidadePsi content safety API")

    config = get_content_safety_config()
    if not config.enabled:
        logger.warning(
            "CONTENT_SAFETY_ENABLED is not set; sensitive content will only "
            "produce warnings and never be blocked."
        )
    elif not config.block_high_risk:
        logger.info("Content safety enabled in warn-only mode")
    if config.medium_threshold > config.high_threshold:
        logger.warning(
            "CONTENT_SAFETY_RISK_THRESHOLD_MEDIUM (%d) is above "
            "CONTENT_SAFETY_RISK_THRESHOLD_HIGH (%d); scans will be skipped.",
            config.medium_threshold,
            config.high_threshold,
        )

    yield
    logger.info("Shutting down ComunidadePsi content safety API")


app = FastAPI(
    title="ComunidadePsi — Content Safety",
    description="Sensitive data screening for clinical community posts",
    version="0.1.0",
    lifespan=lifespan,
)

cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
)

register_exception_handlers(app)

app.include_router(content_safety.router, prefix="/api/content-safety", tags=["content-safety"])


@app.get("/api/health")
async def health():
    return {"status": "ok"}
