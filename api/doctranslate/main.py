import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from doctranslate.config import settings
from doctranslate.routers import health, translate, ui

logger = logging.getLogger("doctranslate")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("DocTranslate starting up")
    logger.info("Model: %s (max_tokens=%d)", settings.claude_model, settings.claude_max_tokens)
    if not settings.anthropic_api_key:
        logger.warning("ANTHROPIC_API_KEY is not set, translations will fail")

    yield

    logger.info("DocTranslate shutting down")


API_DESCRIPTION = """
# DocTranslate API

Document translation assistant powered by Claude.

## Pipeline

**Upload** (TXT / PDF / DOCX) → prompt (language, style, format, context, options) → Claude → translated text

TXT content is embedded in the prompt. PDF and DOCX files are sent to the model
as a base64 document next to the prompt.

## Styles

`academic`, `professional`, `email`, `formal`, `casual`, `creative`
"""

app = FastAPI(
    title="DocTranslate API",
    description=API_DESCRIPTION,
    version=health.VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "health", "description": "Server status and model configuration"},
        {"name": "translate", "description": "Document translation with Claude"},
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Prometheus metrics
if settings.prometheus_enabled:
    from doctranslate.middleware.metrics import setup_metrics

    setup_metrics(app)

# Routers
app.include_router(ui.router)
app.include_router(health.router, prefix="/api/v1", tags=["health"])
app.include_router(translate.router, prefix="/api/v1", tags=["translate"])
