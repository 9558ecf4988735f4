"""Pull link / image targets out of Markdown and leave positional placeholders.

``![alt](target)`` becomes ``![alt]({$img0})`` and ``[text](target)`` becomes
``[text]({$url0})``.  Indices restart at 0 for every chunk.  Images must be
extracted first: the image syntax contains the link syntax.
"""

from __future__ import annotations

import re

__all__ = [
    "extract_images",
    "extract_links",
    "extract_urls_and_images",
    "restore_links",
]

_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
# Rewritten image markers must not be picked up again by the link pass.
_LINK_RE = re.compile(r"(?<!!)\[([^\]]+)\]\(((?!\{\$img\d+\})[^)]+)\)")
_PLACEHOLDER_RE = re.compile(r"\{\$(url|img)(\d+)\}")


def _extract(pattern: re.Pattern[str], text: str, fmt: str) -> tuple[str, list[str]]:
    targets: list[str] = []

    def _replace(m: re.Match[str]) -> str:
        targets.append(m.group(2))
        return fmt.format(label=m.group(1), index=len(targets) - 1)

    return pattern.sub(_replace, text), targets


def extract_images(text: str) -> tuple[str, list[str]]:
    """Rewrite image targets to ``{$img<i>}``; return ``(text, images)``."""
    return _extract(_IMAGE_RE, text, "![{label}]({{$img{index}}})")


def extract_links(text: str) -> tuple[str, list[str]]:
    """Rewrite link targets to ``{$url<i>}``; return ``(text, urls)``."""
    return _extract(_LINK_RE, text, "[{label}]({{$url{index}}})")


def extract_urls_and_images(text: str) -> tuple[str, list[str], list[str]]:
    """Run both passes (images first) → ``(content, urls, images)``."""
    content, images = extract_images(text)
    content, urls = extract_links(content)
    return content, urls, images


def restore_links(text: str, urls: list[str], images: list[str]) -> str:
    """Inverse of :func:`extract_urls_and_images`.

    Raises ``IndexError`` when a placeholder points past the given lists.
    """

    def _replace(m: re.Match[str]) -> str:
        targets = urls if m.group(1) == "url" else images
        return targets[int(m.group(2))]

    return _PLACEHOLDER_RE.sub(_replace, text)
