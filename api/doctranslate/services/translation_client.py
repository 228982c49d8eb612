import logging

import anthropic

from doctranslate.config import settings
from doctranslate.schemas.translate import TranslationRequest
from doctranslate.services.errors import ApiError, TranslationFailure
from doctranslate.services.prompt_builder import build_prompt

logger = logging.getLogger("doctranslate")

EMPTY_RESULT_FALLBACK = "Translation was not possible."


def build_message(request: TranslationRequest, prompt: str) -> dict:
    """Single user message: document part then prompt when there is an attachment."""
    if request.attachment is not None:
        return {
            "role": "user",
            "content": [
                {
                    "type": "document",
                    "source": {
                        "type": "base64",
                        "media_type": request.attachment.media_type,
                        "data": request.attachment.data,
                    },
                },
                {"type": "text", "text": prompt},
            ],
        }
    return {"role": "user", "content": prompt}


def extract_text(content) -> str:
    """Concatenate the text blocks of a Messages API response, in order."""
    return "".join(block.text for block in content if block.type == "text")


class TranslationClient:
    def __init__(
        self,
        client: anthropic.AsyncAnthropic,
        model: str | None = None,
        max_tokens: int | None = None,
    ):
        self.client = client
        self.model = model or settings.claude_model
        self.max_tokens = max_tokens or settings.claude_max_tokens

    async def translate(self, request: TranslationRequest) -> str:
        """Translate one request with a single Messages API call.

        Raises ApiError on a non-success status and TranslationFailure on any
        other error. An empty answer returns EMPTY_RESULT_FALLBACK.
        """
        prompt = build_prompt(request)
        message = build_message(request, prompt)

        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[message],
            )
            translated = extract_text(response.content)
        except anthropic.APIStatusError as e:
            status_text = e.response.reason_phrase or str(e.status_code)
            logger.warning("Translation API returned %d %s", e.status_code, status_text)
            raise ApiError(status_text, status_code=e.status_code) from e
        except Exception as e:
            logger.exception("Translation error: %s", e)
            raise TranslationFailure() from e

        return translated or EMPTY_RESULT_FALLBACK


def load_translation_client() -> TranslationClient:
    logger.info("Initializing Claude translation client (%s)", settings.claude_model)
    client = anthropic.AsyncAnthropic(
        api_key=settings.anthropic_api_key,
        max_retries=0,
    )
    return TranslationClient(client)
