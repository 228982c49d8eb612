import logging

from fastapi import APIRouter

from doctranslate.config import settings
from doctranslate.schemas.health import HealthResponse

logger = logging.getLogger("doctranslate")
router = APIRouter()

VERSION = "0.1.0"


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    """Reports the configured model and whether an API key is set.

    The API itself is not called.
    """
    key_ok = bool(settings.anthropic_api_key)

    return HealthResponse(
        status="healthy" if key_ok else "degraded",
        version=VERSION,
        model=settings.claude_model,
        api_key_configured=key_ok,
    )
