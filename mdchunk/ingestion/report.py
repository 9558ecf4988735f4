"""Chunk-size reports and JSON output for chunked files."""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path

from mdchunk.core.types import Doc

__all__ = ["ChunkReport", "format_report_table", "write_chunks_json"]

_COLUMNS = ("File", "Avg Size", "Median Size", "Min Size", "Max Size", "Total Chunks")


@dataclass(frozen=True)
class ChunkReport:
    file: str
    avg_chunk_size: float
    median_chunk_size: int
    min_chunk_size: int
    max_chunk_size: int
    total_chunks: int

    @classmethod
    def from_docs(cls, file: str, docs: list[Doc]) -> "ChunkReport":
        """Summarise ``metadata.tokens`` over *docs*.

        The median is the upper middle element for even counts.
        """
        sizes = sorted(doc.metadata.tokens for doc in docs)
        if not sizes:
            return cls(file, 0.0, 0, 0, 0, 0)
        return cls(
            file=file,
            avg_chunk_size=sum(sizes) / len(sizes),
            median_chunk_size=sizes[len(sizes) // 2],
            min_chunk_size=sizes[0],
            max_chunk_size=sizes[-1],
            total_chunks=len(sizes),
        )


def write_chunks_json(source: str | Path, docs: list[Doc]) -> Path:
    """Write *docs* as a pretty JSON array to ``<source>.json``; return that path."""
    json_path = Path(source).with_suffix(".json")
    payload = [doc.model_dump() for doc in docs]
    json_path.write_text(
        json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
    )
    return json_path


def format_report_table(reports: list[ChunkReport]) -> str:
    header = "{:<30} {:<15} {:<15} {:<15} {:<15} {:<15}".format(*_COLUMNS)
    lines = [header, "-" * 105]
    for r in reports:
        lines.append(
            f"{r.file:<30} {r.avg_chunk_size:<15.2f} {r.median_chunk_size:<15} "
            f"{r.min_chunk_size:<15} {r.max_chunk_size:<15} {r.total_chunks:<15}"
        )
    return "\n".join(lines)
