"""CLI helper - chunk a Markdown file or every ``.md`` in a directory.

Each input gets a ``<name>.json`` with its chunks next to it, and a size
report is printed at the end.

Usage::

    python -m scripts.chunk_folder ~/Notes --limit 500
"""

from __future__ import annotations

import logging
import pathlib

import click

from mdchunk.core.chunker import Chunker
from mdchunk.core.config import Settings
from mdchunk.core.types import ChunkingError
from mdchunk.ingestion.markdown_loader import parse_markdown_file
from mdchunk.ingestion.report import ChunkReport
from mdchunk.ingestion.report import format_report_table
from mdchunk.ingestion.report import write_chunks_json
from mdchunk.utils.logging_utils import configure_logging

logger = logging.getLogger("mdchunk.scripts.chunk_folder")


def process_file(
    path: pathlib.Path,
    chunker: Chunker,
    limit: int,
    dry_run: bool = False,
    strip_frontmatter: bool = True,
) -> ChunkReport:
    docs = parse_markdown_file(
        path, limit, chunker=chunker, strip_frontmatter=strip_frontmatter
    )
    if not dry_run:
        json_path = write_chunks_json(path, docs)
        logger.info("Wrote %s", json_path)
    return ChunkReport.from_docs(path.name, docs)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "input_path",
    envvar="INPUT_PATH",
    type=click.Path(exists=True, path_type=pathlib.Path),
)
@click.option("--limit", type=click.IntRange(min=1), help="Tokens per chunk.")
@click.option("--model", "model_name", help="Model whose tokenizer to use.")
@click.option("--dry-run", is_flag=True, help="Chunk + report but skip JSON output.")
@click.option("--log-level", help="Logging level (default: LOG_LEVEL or INFO).")
def main(
    input_path: pathlib.Path,
    limit: int | None,
    model_name: str | None,
    dry_run: bool,
    log_level: str | None,
    chunker: Chunker | None = None,
) -> None:
    """Chunk *INPUT_PATH* (a file, or a directory of ``.md`` files)."""
    cfg = Settings()
    if model_name:
        cfg.model_name = model_name
    configure_logging(log_level or cfg.log_level)
    limit = limit or cfg.token_limit
    chunker = chunker or Chunker.from_settings(cfg)

    reports: list[ChunkReport] = []
    if input_path.is_file():
        reports.append(
            process_file(input_path, chunker, limit, dry_run, cfg.strip_frontmatter)
        )
    else:
        paths = sorted(input_path.glob("*.md"))
        if not paths:
            click.echo("No markdown files found - exiting.")
            raise SystemExit(0)

        with click.progressbar(paths, label="Chunking files...") as bar:
            for p in bar:
                try:
                    reports.append(
                        process_file(p, chunker, limit, dry_run, cfg.strip_frontmatter)
                    )
                except (ChunkingError, OSError, UnicodeDecodeError) as exc:
                    logger.warning("Skipping %s: %s", p, exc)

    click.echo("\nProcessing Report:")
    click.echo(format_report_table(reports))


if __name__ == "__main__":  # pragma: no cover
    main()
