"""Token counting capability.

The chunker only needs ``encode(text) -> token ids``; anything with that
method works (tests use tiny deterministic stand-ins).  The production
implementation wraps ``tiktoken``.
"""

from __future__ import annotations

from functools import lru_cache
import logging
from typing import Protocol
from typing import Sequence

import tiktoken

__all__ = ["DEFAULT_ENCODING", "TiktokenTokenizer", "Tokenizer", "get_tokenizer"]

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "cl100k_base"


class Tokenizer(Protocol):
    def encode(self, text: str) -> Sequence[int]: ...


class TiktokenTokenizer:
    """BPE tokenizer backed by ``tiktoken``.

    *encoding_name* wins over *model_name*; an unknown model falls back to
    ``cl100k_base``.
    """

    def __init__(self, model_name: str | None = None, encoding_name: str | None = None):
        self.model_name = model_name
        if encoding_name:
            self._encoding = tiktoken.get_encoding(encoding_name)
        elif model_name:
            try:
                self._encoding = tiktoken.encoding_for_model(model_name)
            except KeyError:
                logger.warning(
                    "No tiktoken encoding known for model %r, using %s",
                    model_name,
                    DEFAULT_ENCODING,
                )
                self._encoding = tiktoken.get_encoding(DEFAULT_ENCODING)
        else:
            self._encoding = tiktoken.get_encoding(DEFAULT_ENCODING)

    @property
    def encoding_name(self) -> str:
        return self._encoding.name

    def encode(self, text: str) -> list[int]:
        # Special-token literals in user text are counted, not rejected.
        return self._encoding.encode(text, allowed_special="all")


@lru_cache(maxsize=8)
def get_tokenizer(
    model_name: str | None = None, encoding_name: str | None = None
) -> TiktokenTokenizer:
    """Cached tokenizer per model / encoding (loading BPE ranks is slow)."""
    return TiktokenTokenizer(model_name=model_name, encoding_name=encoding_name)
