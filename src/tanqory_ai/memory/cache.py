"""
Process-wide cache of the merged company memory.

The merged string is computed once per ``MemoryCache``: the first caller
starts a single task and every concurrent caller awaits that same task, so
the corpus is never loaded twice.
"""

import asyncio
from collections.abc import Iterable, Sequence

from tanqory_ai.memory.config import (
    DEFAULT_SEPARATOR,
    TRUNCATION_MARKER,
    get_memory_settings,
)
from tanqory_ai.memory.loader import CorpusLoader
from tanqory_ai.memory.manifest import MEMORY_DOCUMENTS
from tanqory_ai.utils.logger import logger


def sanitize_chunk(text: str) -> str:
    """Normalize line endings and trim surrounding whitespace."""
    return text.replace("\r\n", "\n").strip()


def merge_documents(
    contents: Iterable[str],
    max_chars: int,
    separator: str = DEFAULT_SEPARATOR,
    marker: str = TRUNCATION_MARKER,
) -> str:
    """Merge document contents into one bounded memory string.

    Args:
        contents: Raw document texts in manifest order
        max_chars: Hard cap on merged characters before the marker
        separator: Text placed between documents
        marker: Appended after the cut when the cap was exceeded

    Returns:
        str: The merged memory, at most ``max_chars + len(marker)`` long
    """
    chunks = [chunk for chunk in map(sanitize_chunk, contents) if chunk]
    merged = separator.join(chunks)
    if len(merged) > max_chars:
        return merged[:max_chars] + marker
    return merged


class MemoryCache:
    """Lazily computed, memoized merged memory."""

    def __init__(
        self,
        loader: CorpusLoader | None = None,
        manifest: Sequence[str] = MEMORY_DOCUMENTS,
        max_chars: int | None = None,
        separator: str = DEFAULT_SEPARATOR,
        marker: str = TRUNCATION_MARKER,
    ) -> None:
        self.loader = loader or CorpusLoader()
        self.manifest = tuple(manifest)
        self.max_chars = (
            max_chars if max_chars is not None else get_memory_settings().max_chars
        )
        self.separator = separator
        self.marker = marker
        self._task: asyncio.Task[str] | None = None
        self._value: str | None = None

    @property
    def is_loaded(self) -> bool:
        return self._value is not None

    async def _build(self) -> str:
        entries = await self.loader.load_document_entries(self.manifest)
        merged = merge_documents(
            (entry.content for entry in entries),
            self.max_chars,
            separator=self.separator,
            marker=self.marker,
        )
        empty = [
            entry.identifier for entry in entries if not sanitize_chunk(entry.content)
        ]
        logger.info(
            "Company memory loaded",
            documents=len(entries),
            non_empty=len(entries) - len(empty),
            empty_documents=empty,
            chars=len(merged),
            truncated=merged.endswith(self.marker),
        )
        return merged

    async def get_memory(self) -> str:
        """Return the merged memory, loading it on first use.

        Returns:
            str: The merged, truncated memory string
        """
        if self._value is not None:
            return self._value

        if self._task is None:
            self._task = asyncio.ensure_future(self._build())
        task = self._task

        try:
            # Shielded so a cancelled caller does not cancel the shared load.
            value = await asyncio.shield(task)
        except Exception:
            if self._task is task:
                self._task = None
            raise

        # A reset during the load detaches this task; its result is not kept.
        if self._task is task:
            self._value = value
        return value

    def reset(self) -> None:
        """Forget the memoized value so the next call reloads the corpus.

        A load already in flight is detached, not cancelled: callers awaiting
        it still receive its result, but it is not memoized.
        """
        self._task = None
        self._value = None


_memory_cache: MemoryCache | None = None


def get_memory_cache() -> MemoryCache:
    """
    Get the process-wide memory cache.

    Returns:
        MemoryCache: The shared cache instance
    """
    global _memory_cache
    if _memory_cache is None:
        _memory_cache = MemoryCache()
    return _memory_cache


def set_memory_cache(cache: MemoryCache | None) -> None:
    """
    Replace the process-wide memory cache.

    Args:
        cache: The cache to use, or None to build a fresh one on next access
    """
    global _memory_cache
    _memory_cache = cache
