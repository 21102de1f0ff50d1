"""Company memory: the bundled documentation corpus given to the model."""

from tanqory_ai.memory.cache import (
    MemoryCache,
    get_memory_cache,
    merge_documents,
    sanitize_chunk,
    set_memory_cache,
)
from tanqory_ai.memory.config import MemorySettings, get_memory_settings
from tanqory_ai.memory.loader import CorpusLoader, MemoryDocument
from tanqory_ai.memory.manifest import MEMORY_DOCUMENTS

__all__ = [
    "MEMORY_DOCUMENTS",
    "CorpusLoader",
    "MemoryCache",
    "MemoryDocument",
    "MemorySettings",
    "get_memory_cache",
    "get_memory_settings",
    "merge_documents",
    "sanitize_chunk",
    "set_memory_cache",
]
