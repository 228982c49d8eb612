"""Tests for run_translate timing and outcome metrics."""

import pytest
from prometheus_client import REGISTRY

from conftest import connection_error, make_response, status_error
from doctranslate.schemas.translate import TranslationRequest
from doctranslate.services.errors import ApiError, TranslationFailure
from doctranslate.services.pipeline import run_translate


def _count(outcome: str) -> float:
    value = REGISTRY.get_sample_value(
        "doctranslate_translations_total", {"outcome": outcome}
    )
    return value or 0.0


def _request() -> TranslationRequest:
    return TranslationRequest(raw_text="hello")


class TestRunTranslate:
    @pytest.mark.asyncio
    async def test_success_returns_text_and_counts_success(self, make_client):
        before = _count("success")
        client = make_client(response=make_response(("text", "bonjour")))

        translation, processing_ms = await run_translate(client, _request())

        assert translation == "bonjour"
        assert processing_ms >= 0
        assert _count("success") == before + 1

    @pytest.mark.asyncio
    async def test_api_error_counts_api_outcome(self, make_client):
        before_api = _count("api")
        before_success = _count("success")
        client = make_client(error=status_error(500))

        with pytest.raises(ApiError):
            await run_translate(client, _request())

        assert _count("api") == before_api + 1
        assert _count("success") == before_success

    @pytest.mark.asyncio
    async def test_network_failure_counts_network_outcome(self, make_client):
        before = _count("network")
        client = make_client(error=connection_error())

        with pytest.raises(TranslationFailure):
            await run_translate(client, _request())

        assert _count("network") == before + 1
