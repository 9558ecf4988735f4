"""ATX heading extraction (``#`` … ``######``)."""

from __future__ import annotations

import re

from mdchunk.core.types import Headings

__all__ = ["extract_headers", "update_current_headers"]

_HEADER_RE = re.compile(r"^(#{1,6})[ \t]+(.*)$", re.MULTILINE)


def extract_headers(text: str) -> Headings:
    """Return the headings found in *text*, grouped by level in appearance order."""
    headers = Headings()
    for m in _HEADER_RE.finditer(text):
        content = m.group(2).strip()
        if content:
            headers.insert(len(m.group(1)), content)
    return headers


def update_current_headers(current: Headings, text: str) -> Headings:
    """Merge the headings of one chunk into the running *current* context.

    Returns the headings that were found in *text*.
    """
    extracted = extract_headers(text)
    current.merge(extracted)
    return extracted
