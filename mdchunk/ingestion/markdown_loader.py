"""Load a Markdown file → List[Doc] bounded by a token limit.

YAML front matter (``---`` block at the top) is metadata, not prose, so it
is dropped before chunking unless ``strip_frontmatter=False``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import frontmatter

from mdchunk.core.chunker import Chunker
from mdchunk.core.types import Doc

__all__ = ["load_markdown", "parse_markdown_file"]

logger = logging.getLogger(__name__)


def load_markdown(path: str | Path, strip_frontmatter: bool = True) -> str:
    """Return the text of *path*, optionally without front matter."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if not strip_frontmatter:
        return text

    post = frontmatter.loads(text)
    if not post.metadata:
        # Nothing to drop; keep the file byte-for-byte.
        return text
    logger.debug("Dropped front matter keys %s from %s", sorted(post.metadata), path)
    return post.content


def parse_markdown_file(
    path: str | Path,
    limit: int,
    chunker: Chunker | None = None,
    strip_frontmatter: bool = True,
) -> list[Doc]:
    """Return the *chunked* representation of one Markdown file."""
    chunker = chunker or Chunker()
    text = load_markdown(path, strip_frontmatter=strip_frontmatter)
    docs = chunker.split(text, limit)
    logger.info("Split %s into %d chunks", path, len(docs))
    return docs
