import math

from mdchunk.core.chunker import Chunker


class CharTokenizer:
    """One token per character."""

    def encode(self, text: str) -> list[int]:
        return [ord(ch) for ch in text]


class QuarterTokenizer:
    """``ceil(len(text) / 4)`` tokens - a cheap stand-in for a BPE vocabulary."""

    def encode(self, text: str) -> list[int]:
        return [0] * math.ceil(len(text) / 4)


class FailingTokenizer:
    """Blows up on any text containing *trigger* (every text when empty)."""

    def __init__(self, trigger: str = ""):
        self.trigger = trigger
        self.calls = 0

    def encode(self, text: str) -> list[int]:
        self.calls += 1
        if self.trigger in text:
            raise UnicodeEncodeError("utf-8", text, 0, 1, "unencodable")
        return [0] * len(text)


def make_chunker(tokenizer=None, template: str = "{text}", **kwargs) -> Chunker:
    """Chunker over a stub tokenizer; no envelope unless *template* says so."""
    return Chunker(tokenizer=tokenizer or CharTokenizer(), template=template, **kwargs)
