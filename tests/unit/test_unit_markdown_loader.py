from __future__ import annotations

from pathlib import Path

import pytest

from mdchunk.ingestion.markdown_loader import load_markdown
from mdchunk.ingestion.markdown_loader import parse_markdown_file


@pytest.fixture
def tmp_file(tmp_path: Path) -> Path:
    """Create a temporary markdown file with front matter."""
    p = tmp_path / "test.md"
    p.write_text(
        "---\ncreated: Jun 11, 2024 at 9:40 AM\ntitle: Note\n---\n"
        "# Title\n\nThis is a [test](https://example.com).",
        encoding="utf-8",
    )
    return p


def test_parse_markdown_file(tmp_file: Path, char_chunker):
    """Front matter is dropped and the body is chunked."""
    docs = parse_markdown_file(tmp_file, 1000, chunker=char_chunker)
    assert len(docs) == 1
    doc = docs[0]
    assert doc.text == "# Title\n\nThis is a [test]({$url0})."
    assert doc.metadata.headers == {"h1": ["Title"]}
    assert doc.metadata.urls == ["https://example.com"]


def test_keep_frontmatter(tmp_file: Path, char_chunker):
    docs = parse_markdown_file(
        tmp_file, 1000, chunker=char_chunker, strip_frontmatter=False
    )
    assert docs[0].text.startswith("---\ncreated:")
    assert docs[0].metadata.headers == {"h1": ["Title"]}


def test_file_without_frontmatter_is_read_verbatim(tmp_path: Path):
    p = tmp_path / "plain.md"
    p.write_text("\n# Heading\n\nbody\n\n", encoding="utf-8")
    assert load_markdown(p) == "\n# Heading\n\nbody\n\n"


def test_small_limit_gives_several_chunks(tmp_file: Path, char_chunker):
    docs = parse_markdown_file(tmp_file, 12, chunker=char_chunker)
    assert len(docs) > 1
    assert all(d.metadata.headers == {"h1": ["Title"]} for d in docs)


def test_missing_file(tmp_path: Path, char_chunker):
    with pytest.raises(FileNotFoundError):
        parse_markdown_file(tmp_path / "nope.md", 100, chunker=char_chunker)
