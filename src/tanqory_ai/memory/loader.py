"""
Corpus loader for the company memory documents.

Each manifest identifier is resolved under a documents root, materialised as
a local file and decoded as UTF-8. A document that cannot be read contributes
an empty string so one bad asset never costs the whole memory.
"""

import asyncio
from collections.abc import Iterable
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from tanqory_ai.memory.config import get_memory_settings
from tanqory_ai.utils.logger import logger


class MemoryDocument(BaseModel):
    """One bundled document, as read at load time."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    content: str


def bundled_documents_root() -> Traversable:
    """Return the documents directory shipped inside the package."""
    return resources.files("tanqory_ai.memory") / "documents"


class CorpusLoader:
    """Best-effort reader for manifest documents."""

    def __init__(self, root: Traversable | Path | None = None) -> None:
        """Initialize the loader.

        Args:
            root: Directory holding the documents. Defaults to
                ``MEMORY_DOCUMENTS_PATH`` when set, otherwise the bundled copies.
        """
        if root is None:
            root = get_memory_settings().documents_path or bundled_documents_root()
        self.root = root

    def _read(self, identifier: str) -> str:
        source = self.root / identifier
        with resources.as_file(source) as path:
            return path.read_bytes().decode("utf-8")

    async def load_document(self, identifier: str) -> str:
        """Read one document as text.

        Args:
            identifier: Manifest identifier (file name under the root)

        Returns:
            str: The decoded content, or an empty string if it could not be
            resolved, read or decoded
        """
        try:
            return await asyncio.to_thread(self._read, identifier)
        except Exception as e:
            logger.warning(
                "Failed to read memory document",
                identifier=identifier,
                root=str(self.root),
                error=str(e),
                error_type=type(e).__name__,
            )
            return ""

    async def load_document_entry(self, identifier: str) -> MemoryDocument:
        content = await self.load_document(identifier)
        return MemoryDocument(identifier=identifier, content=content)

    async def load_document_entries(
        self, identifiers: Iterable[str]
    ) -> list[MemoryDocument]:
        """Read all documents in parallel.

        Returns:
            list[MemoryDocument]: One entry per identifier, in the same order
        """
        return list(
            await asyncio.gather(
                *(self.load_document_entry(identifier) for identifier in identifiers)
            )
        )

    async def load_documents(self, identifiers: Iterable[str]) -> list[str]:
        """Read all documents in parallel, keeping only their text."""
        entries = await self.load_document_entries(identifiers)
        return [entry.content for entry in entries]
