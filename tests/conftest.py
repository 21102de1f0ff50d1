"""Shared fixtures for the chat pipeline tests."""

import asyncio
import json
from collections.abc import Callable, Iterable

import httpx
import pytest

from tanqory_ai.ai.chat import service as chat_service_module
from tanqory_ai.ai.chat.schemas import ChatOptions, Tone
from tanqory_ai.ai.openai.config import OpenAISettings
from tanqory_ai.memory import cache as memory_cache_module
from tanqory_ai.memory.loader import MemoryDocument


class StubLoader:
    """In-memory stand-in for CorpusLoader that counts full loads."""

    def __init__(self, documents: dict[str, str]) -> None:
        self.documents = documents
        self.load_calls = 0

    async def load_document_entries(
        self, identifiers: Iterable[str]
    ) -> list[MemoryDocument]:
        self.load_calls += 1
        # Yield so concurrent callers overlap with the in-flight load.
        await asyncio.sleep(0.01)
        return [
            MemoryDocument(identifier=identifier, content=self.documents.get(identifier, ""))
            for identifier in identifiers
        ]


class RecordingTransport:
    """Builds an httpx.MockTransport and keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def json_bodies(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture(autouse=True)
def reset_singletons():
    """Keep process-wide instances from leaking between tests."""
    memory_cache_module.set_memory_cache(None)
    chat_service_module.set_chat_service(None)
    yield
    memory_cache_module.set_memory_cache(None)
    chat_service_module.set_chat_service(None)


@pytest.fixture
def openai_settings():
    """Settings with a test key and no .env lookups."""
    return OpenAISettings(
        _env_file=None,
        api_key="test-api-key",
        model_name="gpt-4.1-mini",
        endpoint_url="https://api.test/v1/responses",
        request_timeout=5,
    )


@pytest.fixture
def chat_options():
    return ChatOptions(
        user_name="Nat",
        persona="Support Lead",
        email="nat@tanqory.com",
        tone=Tone.CONCISE,
    )


@pytest.fixture
def stub_loader():
    return StubLoader({"policy.md": "Policy A"})


@pytest.fixture
def recording_transport():
    """Factory for transports that answer every request with ``payload``."""

    def build(payload: dict | None = None, status_code: int = 200) -> RecordingTransport:
        body = payload if payload is not None else {"output_text": "ok"}
        return RecordingTransport(
            lambda request: httpx.Response(status_code, json=body)
        )

    return build
