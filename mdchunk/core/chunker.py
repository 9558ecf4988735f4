"""Token-bounded Markdown splitter.

``Chunker.split(text, limit)`` walks *text* front to back.  For every chunk
it searches an end offset (see :mod:`mdchunk.core.boundary`), merges the
chunk's headings into the running heading context, swaps link / image
targets for placeholders and emits a :class:`Doc`.

Token counts are taken on the chunk wrapped in ``template`` (by default a
chat turn), since that is how the chunk is eventually shown to a model.
"""

from __future__ import annotations

import logging
from typing import Iterator

from mdchunk.core.boundary import FULLNESS_FLOOR
from mdchunk.core.boundary import SHRINK_RATIO
from mdchunk.core.boundary import find_chunk_end
from mdchunk.core.config import Settings
from mdchunk.core.headings import update_current_headers
from mdchunk.core.links import extract_urls_and_images
from mdchunk.core.tokenizer import Tokenizer
from mdchunk.core.tokenizer import get_tokenizer
from mdchunk.core.types import ChunkerConfigError
from mdchunk.core.types import Doc
from mdchunk.core.types import Headings
from mdchunk.core.types import Metadata
from mdchunk.core.types import TokenizationError

__all__ = ["CHAT_TEMPLATE", "Chunker"]

logger = logging.getLogger(__name__)

CHAT_TEMPLATE = "<|im_start|>user\n{text}<|im_end|>\n<|im_start|>assistant<|im_end|>"


class Chunker:
    """Split text into chunks of at most ``limit`` tokens (template included)."""

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        model_name: str | None = None,
        template: str = CHAT_TEMPLATE,
        shrink_ratio: float = SHRINK_RATIO,
        fullness_floor: float = FULLNESS_FLOOR,
    ):
        """Initialize Chunker.

        Args:
            tokenizer: Anything with ``encode(text)``; defaults to tiktoken
                for *model_name*.
            model_name: Only used to pick the default tokenizer.
            template: Envelope with a ``{text}`` slot applied before counting.
            shrink_ratio: Fraction of the span removed per shrink step.
            fullness_floor: Minimum fill (fraction of limit) for newline snapping.
        """
        if "{text}" not in template:
            raise ChunkerConfigError("template must contain a '{text}' slot")
        if not 0 < shrink_ratio < 1:
            raise ChunkerConfigError(
                f"shrink_ratio must be in (0, 1), got {shrink_ratio}"
            )
        if not 0 < fullness_floor <= 1:
            raise ChunkerConfigError(
                f"fullness_floor must be in (0, 1], got {fullness_floor}"
            )

        self.model_name = model_name or "gpt-4"
        self.tokenizer = tokenizer or get_tokenizer(self.model_name)
        self.template = template
        self.shrink_ratio = shrink_ratio
        self.fullness_floor = fullness_floor
        self._overhead: int | None = None

    @classmethod
    def from_settings(
        cls, cfg: Settings | None = None, tokenizer: Tokenizer | None = None
    ) -> "Chunker":
        cfg = cfg or Settings()
        return cls(
            tokenizer=tokenizer or get_tokenizer(cfg.model_name, cfg.encoding_name),
            model_name=cfg.model_name,
            shrink_ratio=cfg.shrink_ratio,
            fullness_floor=cfg.fullness_floor,
        )

    # -------- Token counting ---------------------------------------------
    def _encode_len(self, text: str) -> int:
        try:
            return len(self.tokenizer.encode(text))
        except Exception as exc:
            raise TokenizationError(f"Failed to tokenize text: {exc}") from exc

    def format_for_tokenization(self, text: str) -> str:
        return self.template.replace("{text}", text)

    def count_tokens(self, text: str) -> int:
        """Tokens of *text* once wrapped in the template."""
        return self._encode_len(self.format_for_tokenization(text))

    @property
    def overhead(self) -> int:
        """Fixed token cost of the template itself."""
        if self._overhead is None:
            wrapped = self._encode_len(self.format_for_tokenization(""))
            self._overhead = wrapped - self._encode_len("")
        return self._overhead

    # -------- Splitting --------------------------------------------------
    def _check_limit(self, limit: int) -> None:
        if limit < 1:
            raise ChunkerConfigError(f"Token limit must be positive, got {limit}")
        # An empty span already costs the envelope twice: once inside
        # count_tokens and once as overhead.
        empty_cost = self.count_tokens("") + self.overhead
        if limit <= empty_cost:
            raise ChunkerConfigError(
                f"Token limit {limit} leaves no room for text: an empty chunk "
                f"already costs {empty_cost} tokens"
            )

    def spans(self, text: str, limit: int) -> Iterator[tuple[int, int]]:
        """Yield the ``(start, end)`` offsets of successive chunks.

        Spans are contiguous and cover *text* exactly.
        """
        self._check_limit(limit)
        position = 0
        while position < len(text):
            end = find_chunk_end(
                text,
                position,
                limit,
                self.count_tokens,
                overhead=self.overhead,
                shrink_ratio=self.shrink_ratio,
                fullness_floor=self.fullness_floor,
            )
            yield position, end
            position = end

    def split(self, text: str, limit: int) -> list[Doc]:
        """Split *text* into chunks of at most *limit* tokens.

        Raises:
            ChunkerConfigError: *limit* cannot hold any content.
            TokenizationError: the tokenizer failed; no partial result.
        """
        logger.info("Starting split process with limit: %d tokens", limit)
        docs: list[Doc] = []
        current_headers = Headings()

        for start, end in self.spans(text, limit):
            logger.debug("Processing chunk %d-%d", start, end)
            chunk_text = text[start:end]
            tokens = self.count_tokens(chunk_text)

            update_current_headers(current_headers, chunk_text)
            content, urls, images = extract_urls_and_images(chunk_text)

            docs.append(
                Doc(
                    text=content,
                    metadata=Metadata(
                        tokens=tokens,
                        headers=current_headers.to_dict(),
                        urls=urls,
                        images=images,
                    ),
                )
            )

        logger.info("Split process completed. Total chunks: %d", len(docs))
        return docs
