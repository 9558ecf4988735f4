"""
Shared pytest fixtures for all tests.
"""

from pathlib import Path

import pytest

from tests.helpers import CharTokenizer
from tests.helpers import QuarterTokenizer
from tests.helpers import make_chunker

# ---------------------------------------------------------------------------
# Automatic test markers based on path
# ---------------------------------------------------------------------------
# We want to avoid sprinkling `@pytest.mark.unit` / `integration` decorators
# throughout the codebase.  Instead, assign the marker implicitly from the
# directory the test file lives in.


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]):
    """Dynamically add pytest markers depending on filepath.

    Any test located in ``tests/unit`` gets the ``unit`` marker and tests in
    ``tests/integration`` get ``integration``.

    This allows developers to drop explicit decorators in test source files
    while retaining the same marker-based selection semantics (e.g.
    ``pytest -m unit``).
    """

    root_path = Path(config.rootdir)

    for item in items:
        # Convert the file path to a string relative to the project root
        rel_path = Path(item.fspath).resolve().relative_to(root_path).as_posix()

        if rel_path.startswith("tests/unit/"):
            item.add_marker("unit")
        elif rel_path.startswith("tests/integration/"):
            item.add_marker("integration")


# ---------------------------------------------------------------------------
# Chunkers over deterministic tokenizers
# ---------------------------------------------------------------------------
# Token counts from a real BPE vocabulary are hard to reason about in
# assertions, so unit tests count characters (or quarter characters).


@pytest.fixture
def char_chunker():
    """Chunker counting one token per character, no envelope."""
    return make_chunker(CharTokenizer())


@pytest.fixture
def quarter_chunker():
    """Chunker counting ``ceil(len / 4)`` tokens, no envelope."""
    return make_chunker(QuarterTokenizer())


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep a developer's shell / .env from leaking into Settings()."""
    for var in (
        "TOKEN_LIMIT",
        "MODEL_NAME",
        "ENCODING_NAME",
        "SHRINK_RATIO",
        "FULLNESS_FLOOR",
        "STRIP_FRONTMATTER",
        "LOG_LEVEL",
        "INPUT_PATH",
    ):
        monkeypatch.delenv(var, raising=False)
