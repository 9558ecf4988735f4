"""Domain models shared across the package.

A split produces a list of :class:`Doc` objects.  Each carries the rewritten
chunk text plus :class:`Metadata` (token count, heading ancestry, extracted
link and image targets).
"""

from __future__ import annotations

from langchain_core.documents import Document
from pydantic import BaseModel
from pydantic import Field

__all__ = [
    "HEADING_LEVELS",
    "ChunkerConfigError",
    "ChunkingError",
    "Doc",
    "Headings",
    "Metadata",
    "TokenizationError",
    "heading_key",
]

HEADING_LEVELS = range(1, 7)


# --------------------------------------------------------------------- #
# Errors                                                                #
# --------------------------------------------------------------------- #
class ChunkingError(Exception):
    """Base class for everything :meth:`Chunker.split` can raise."""


class TokenizationError(ChunkingError):
    """The tokenizer failed to encode some text."""


class ChunkerConfigError(ChunkingError, ValueError):
    """Limit / template / tuning constants that make splitting impossible."""


# --------------------------------------------------------------------- #
# Headings                                                              #
# --------------------------------------------------------------------- #
def heading_key(level: int) -> str:
    """``1`` → ``"h1"``."""
    if level not in HEADING_LEVELS:
        raise ValueError(f"Heading level must be 1-6, got {level}")
    return f"h{level}"


_HEADING_KEYS = frozenset(heading_key(lvl) for lvl in HEADING_LEVELS)


class Headings:
    """Ordered heading text per level (``"h1"`` … ``"h6"``).

    The running instance is owned by the split loop and mutated in place;
    chunks receive a copy via :meth:`to_dict`.
    """

    def __init__(self, entries: dict[str, list[str]] | None = None):
        self._entries: dict[str, list[str]] = {}
        for key, values in (entries or {}).items():
            if key not in _HEADING_KEYS:
                raise ValueError(f"Heading key must be one of h1-h6, got {key!r}")
            self._entries[key] = list(values)

    def insert(self, level: int, text: str) -> None:
        self._entries.setdefault(heading_key(level), []).append(text)

    def get(self, level: int) -> list[str]:
        return list(self._entries.get(heading_key(level), []))

    def levels(self) -> list[int]:
        """Levels that currently hold at least one heading, shallowest first."""
        return [lvl for lvl in HEADING_LEVELS if heading_key(lvl) in self._entries]

    def clear_deeper(self, level: int) -> None:
        """Drop every tracked level strictly deeper than *level*."""
        for lvl in range(level + 1, 7):
            self._entries.pop(heading_key(lvl), None)

    def merge(self, extracted: Headings) -> None:
        """Fold headings found in one chunk into this running context.

        Levels are processed shallowest first; a level that received new
        headings invalidates everything below it.
        """
        for level in extracted.levels():
            for text in extracted.get(level):
                self.insert(level, text)
            self.clear_deeper(level)

    def to_dict(self) -> dict[str, list[str]]:
        """Copy of the context, shallowest level first."""
        return {
            heading_key(lvl): list(self._entries[heading_key(lvl)])
            for lvl in self.levels()
        }

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Headings):
            return self.to_dict() == other.to_dict()
        if isinstance(other, dict):
            return self.to_dict() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Headings({self.to_dict()!r})"


# --------------------------------------------------------------------- #
# Chunk documents                                                       #
# --------------------------------------------------------------------- #
class Metadata(BaseModel):
    """Per-chunk metadata.

    Frozen only blocks reassigning fields; the ``headers``, ``urls`` and
    ``images`` containers can still be mutated in place.
    """

    model_config = {"frozen": True}

    tokens: int = Field(..., ge=0, description="Tokens of the formatted chunk text")
    headers: dict[str, list[str]] = Field(
        default_factory=dict, description="Heading context at the end of the chunk"
    )
    urls: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)


class Doc(BaseModel):
    """One chunk of a split document."""

    model_config = {"frozen": True}

    text: str
    metadata: Metadata

    def to_document(self) -> Document:
        """Convert to a LangChain ``Document`` for vector-store ingestion.

        ``page_content`` is the (placeholder-rewritten) text; metadata keeps
        the same keys as :class:`Metadata`.
        """
        return Document(page_content=self.text, metadata=self.metadata.model_dump())
