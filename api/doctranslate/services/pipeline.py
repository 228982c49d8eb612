import logging
import time

from doctranslate.middleware.metrics import TRANSLATION_DURATION, TRANSLATIONS
from doctranslate.schemas.translate import TranslationRequest
from doctranslate.services.errors import TranslationError
from doctranslate.services.translation_client import TranslationClient

logger = logging.getLogger("doctranslate")


async def run_translate(
    client: TranslationClient, request: TranslationRequest
) -> tuple[str, float]:
    """Translate a request. Returns (translated, processing_ms)."""
    start = time.perf_counter()
    try:
        translation = await client.translate(request)
    except TranslationError as e:
        TRANSLATIONS.labels(outcome=e.stage).inc()
        raise
    finally:
        TRANSLATION_DURATION.observe(time.perf_counter() - start)

    elapsed = (time.perf_counter() - start) * 1000
    TRANSLATIONS.labels(outcome="success").inc()
    logger.info(
        "[PIPELINE] Translate %s -> %s (%s, attachment=%s): %d chars (%dms)",
        request.source_language,
        request.target_language,
        request.style,
        request.attachment is not None,
        len(translation),
        round(elapsed),
    )
    return translation, elapsed
