"""Chunk-end search.

Given a start offset and a token budget, pick where the chunk ends:

1. guess proportionally from the token density of the remaining text,
2. shrink the span by a fixed fraction until it fits,
3. snap to the next (or else previous) line break when the snapped chunk
   still fits and is at least ``fullness_floor`` of the budget.

The search is deliberately approximate: it returns *a* fitting end, not the
largest one, and keeps the number of tokenizer calls per chunk small.
Offsets are ``str`` indices.
"""

from __future__ import annotations

import logging
from typing import Callable

__all__ = [
    "FULLNESS_FLOOR",
    "SHRINK_RATIO",
    "estimate_end",
    "find_chunk_end",
    "shrink_end",
    "snap_to_newline",
]

logger = logging.getLogger(__name__)

SHRINK_RATIO = 0.1
FULLNESS_FLOOR = 0.8

TokenCounter = Callable[[str], int]


def estimate_end(text: str, start: int, limit: int, remaining_tokens: int) -> int:
    """Proportional first guess, clamped to ``[start + 1, len(text)]``."""
    remaining = len(text) - start
    end = start + remaining * limit // max(remaining_tokens, 1)
    return min(max(end, start + 1), len(text))


def shrink_end(start: int, end: int, shrink_ratio: float = SHRINK_RATIO) -> int:
    """Cut ``shrink_ratio`` of the span off *end*; never below ``start + 1``."""
    step = max(int((end - start) * shrink_ratio), 1)
    return max(end - step, start + 1)


def snap_to_newline(
    text: str,
    start: int,
    end: int,
    limit: int,
    count_tokens: TokenCounter,
    overhead: int = 0,
    fullness_floor: float = FULLNESS_FLOOR,
) -> int:
    """Move *end* just past a nearby ``\\n`` if the result is full enough.

    The next line break after *end* is tried first, then the last one before
    it.  A candidate span must satisfy ``tokens + overhead <= limit`` so the
    wrapped chunk stays in budget, and ``tokens >= int(limit * fullness_floor)``
    so it is not left too short; otherwise *end* is returned unchanged.
    """
    min_tokens = int(limit * fullness_floor)

    nl = text.find("\n", end)
    if nl != -1:
        candidate = nl + 1
        tokens = count_tokens(text[start:candidate])
        if min_tokens <= tokens and tokens + overhead <= limit:
            logger.debug("Extending chunk to next newline at %d", candidate)
            return candidate

    nl = text.rfind("\n", 0, end)
    if nl != -1 and nl + 1 > start:
        candidate = nl + 1
        tokens = count_tokens(text[start:candidate])
        if min_tokens <= tokens and tokens + overhead <= limit:
            logger.debug("Reducing chunk to previous newline at %d", candidate)
            return candidate

    return end


def find_chunk_end(
    text: str,
    start: int,
    limit: int,
    count_tokens: TokenCounter,
    overhead: int = 0,
    shrink_ratio: float = SHRINK_RATIO,
    fullness_floor: float = FULLNESS_FLOOR,
) -> int:
    """Return the end offset of the chunk beginning at *start*.

    ``start < end <= len(text)`` always holds.  The chunk satisfies
    ``count_tokens(text[start:end]) + overhead <= limit`` unless even a
    single character exceeds the budget.
    """
    if not 0 <= start < len(text):
        raise ValueError(f"start={start} outside text of length {len(text)}")

    end = estimate_end(text, start, limit, count_tokens(text[start:]))
    tokens = count_tokens(text[start:end])

    while tokens + overhead > limit and end > start + 1:
        logger.debug(
            "Chunk exceeds limit with %d tokens, shrinking from %d",
            tokens + overhead,
            end,
        )
        end = shrink_end(start, end, shrink_ratio)
        tokens = count_tokens(text[start:end])

    end = snap_to_newline(
        text, start, end, limit, count_tokens, overhead, fullness_floor
    )
    logger.debug("Final chunk end: %d", end)
    return end
