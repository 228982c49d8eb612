import logging
from typing import Annotated

from fastapi import Depends

from doctranslate.services.translation_client import (
    TranslationClient,
    load_translation_client,
)

logger = logging.getLogger("doctranslate")

_translation_client: TranslationClient | None = None


def get_translation_client() -> TranslationClient:
    global _translation_client
    if _translation_client is None:
        _translation_client = load_translation_client()
    return _translation_client


TranslationClientDep = Annotated[TranslationClient, Depends(get_translation_client)]
