"""Consistent chunking strategy shared by loaders & LLM chains."""

from __future__ import annotations

from functools import lru_cache

from langchain_core.documents import Document

from mdchunk.core.chunker import Chunker
from mdchunk.core.config import Settings
from mdchunk.core.types import Doc

__all__ = ["get_chunker", "split_markdown", "to_documents"]


@lru_cache(maxsize=1)
def get_chunker() -> Chunker:
    """Singleton Chunker built from :class:`Settings`.

    Cached so repeated calls don't reload the BPE ranks.
    """
    return Chunker.from_settings(Settings())


def split_markdown(text: str, limit: int | None = None) -> list[Doc]:
    """Return token-bounded chunks of *text* (``TOKEN_LIMIT`` when *limit* is None)."""
    if limit is None:
        limit = Settings().token_limit
    return get_chunker().split(text, limit)


def to_documents(docs: list[Doc]) -> list[Document]:
    """LangChain documents for vector-store upserts."""
    return [doc.to_document() for doc in docs]
