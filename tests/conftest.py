"""Shared fixtures: a stand-in for the Anthropic client and SDK error builders."""

from types import SimpleNamespace

import anthropic
import httpx
import pytest

from doctranslate.services.translation_client import TranslationClient

API_URL = "https://api.anthropic.com/v1/messages"


class FakeMessages:
    """Records create() calls and returns a canned response or raises."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


class FakeAnthropic:
    def __init__(self, response=None, error=None):
        self.messages = FakeMessages(response=response, error=error)


def make_response(*blocks):
    """Build a Messages API response from (type, text) pairs."""
    return SimpleNamespace(
        content=[SimpleNamespace(type=kind, text=text) for kind, text in blocks]
    )


def status_error(status_code: int) -> anthropic.APIStatusError:
    request = httpx.Request("POST", API_URL)
    response = httpx.Response(status_code, request=request)
    return anthropic.APIStatusError("error", response=response, body=None)


def connection_error() -> anthropic.APIConnectionError:
    return anthropic.APIConnectionError(request=httpx.Request("POST", API_URL))


@pytest.fixture
def make_client():
    """Factory for a TranslationClient backed by FakeAnthropic."""

    def _make(response=None, error=None) -> TranslationClient:
        fake = FakeAnthropic(response=response, error=error)
        return TranslationClient(fake, model="claude-test", max_tokens=123)

    return _make
