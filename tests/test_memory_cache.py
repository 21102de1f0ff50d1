"""Tests for merging and memoizing the company memory."""

import asyncio
from unittest.mock import patch

import pytest

from tanqory_ai.memory import cache as memory_cache_module
from tanqory_ai.memory.cache import (
    MemoryCache,
    get_memory_cache,
    merge_documents,
    sanitize_chunk,
    set_memory_cache,
)
from tanqory_ai.memory.config import DEFAULT_SEPARATOR, TRUNCATION_MARKER
from tanqory_ai.memory.loader import CorpusLoader, MemoryDocument
from tests.conftest import StubLoader


def test_sanitize_chunk_normalizes_line_endings_and_trims():
    assert sanitize_chunk("  line one\r\nline two\r\n\n ") == "line one\nline two"


def test_merge_documents_drops_empty_and_joins_in_order():
    merged = merge_documents(["  first ", "", "   ", "second\r\n"], max_chars=1000)

    assert merged == f"first{DEFAULT_SEPARATOR}second"


def test_merge_documents_under_cap_is_unchanged():
    merged = merge_documents(["abc", "def"], max_chars=100)

    assert merged == "abc\n\n---\n\ndef"
    assert not merged.endswith(TRUNCATION_MARKER)


def test_merge_documents_at_cap_is_not_truncated():
    merged = merge_documents(["x" * 50], max_chars=50)

    assert merged == "x" * 50


def test_merge_documents_over_cap_is_truncated_with_marker():
    merged = merge_documents(["a" * 40, "b" * 40], max_chars=60)

    assert len(merged) == 60 + len(TRUNCATION_MARKER)
    assert merged.endswith(TRUNCATION_MARKER)
    assert merged.startswith("a" * 40 + DEFAULT_SEPARATOR)


@pytest.mark.asyncio
async def test_get_memory_loads_once_for_sequential_calls():
    loader = StubLoader({"one.md": "One", "two.md": "Two"})
    cache = MemoryCache(loader=loader, manifest=("one.md", "two.md"), max_chars=6000)

    results = [await cache.get_memory() for _ in range(5)]

    assert loader.load_calls == 1
    assert results == ["One\n\n---\n\nTwo"] * 5
    assert cache.is_loaded


@pytest.mark.asyncio
async def test_get_memory_loads_once_for_concurrent_calls():
    loader = StubLoader({"one.md": "One"})
    cache = MemoryCache(loader=loader, manifest=("one.md",), max_chars=6000)

    results = await asyncio.gather(*(cache.get_memory() for _ in range(20)))

    assert loader.load_calls == 1
    assert set(results) == {"One"}


@pytest.mark.asyncio
async def test_get_memory_applies_character_budget():
    loader = StubLoader({"big.md": "z" * 10_000})
    cache = MemoryCache(loader=loader, manifest=("big.md",), max_chars=6000)

    memory = await cache.get_memory()

    assert len(memory) == 6000 + len(TRUNCATION_MARKER)
    assert memory.endswith("[Memory truncated]")


@pytest.mark.asyncio
async def test_get_memory_survives_one_failing_document(tmp_path):
    (tmp_path / "first.md").write_text("First doc\r\n", encoding="utf-8")
    (tmp_path / "broken.md").write_bytes(b"\x80\x81\x82")
    (tmp_path / "third.md").write_text("  Third doc  ", encoding="utf-8")
    cache = MemoryCache(
        loader=CorpusLoader(root=tmp_path),
        manifest=("first.md", "broken.md", "missing.md", "third.md"),
        max_chars=6000,
    )

    memory = await cache.get_memory()

    assert memory == "First doc\n\n---\n\nThird doc"


@pytest.mark.asyncio
async def test_cancelled_caller_does_not_cancel_shared_load():
    loader = StubLoader({"one.md": "One"})
    cache = MemoryCache(loader=loader, manifest=("one.md",), max_chars=6000)

    first = asyncio.ensure_future(cache.get_memory())
    await asyncio.sleep(0)
    first.cancel()

    assert await cache.get_memory() == "One"
    assert loader.load_calls == 1


@pytest.mark.asyncio
async def test_reset_forces_reload():
    loader = StubLoader({"one.md": "One"})
    cache = MemoryCache(loader=loader, manifest=("one.md",), max_chars=6000)

    await cache.get_memory()
    cache.reset()
    await cache.get_memory()

    assert loader.load_calls == 2


@pytest.mark.asyncio
async def test_failed_build_is_not_memoized():
    class FlakyLoader:
        def __init__(self):
            self.calls = 0

        async def load_document_entries(self, identifiers):
            self.calls += 1
            if self.calls == 1:
                raise RuntimeError("boom")
            return [MemoryDocument(identifier="one.md", content="Recovered")]

    loader = FlakyLoader()
    cache = MemoryCache(loader=loader, manifest=("one.md",), max_chars=6000)

    with pytest.raises(RuntimeError):
        await cache.get_memory()

    assert await cache.get_memory() == "Recovered"


@pytest.mark.asyncio
async def test_reset_during_load_does_not_cancel_waiting_callers():
    loader = StubLoader({"one.md": "One"})
    cache = MemoryCache(loader=loader, manifest=("one.md",), max_chars=6000)

    in_flight = asyncio.ensure_future(cache.get_memory())
    await asyncio.sleep(0)
    cache.reset()

    assert await in_flight == "One"
    assert not cache.is_loaded

    assert await cache.get_memory() == "One"
    assert loader.load_calls == 2
    assert cache.is_loaded


@pytest.mark.asyncio
async def test_build_logs_empty_document_identifiers():
    loader = StubLoader({"one.md": "One", "blank.md": "  \r\n "})
    cache = MemoryCache(
        loader=loader, manifest=("one.md", "blank.md", "missing.md"), max_chars=6000
    )

    with patch.object(memory_cache_module.logger, "info") as mock_info:
        assert await cache.get_memory() == "One"

    mock_info.assert_called_once()
    fields = mock_info.call_args.kwargs
    assert fields["documents"] == 3
    assert fields["non_empty"] == 1
    assert fields["empty_documents"] == ["blank.md", "missing.md"]


def test_get_memory_cache_is_shared_and_replaceable():
    assert get_memory_cache() is get_memory_cache()

    custom = MemoryCache(loader=StubLoader({}), manifest=(), max_chars=10)
    set_memory_cache(custom)

    assert get_memory_cache() is custom
