import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import structural_diary
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from structural_diary.builder.selection import ScriptedRandom  # noqa: E402


# Common test fixtures
@pytest.fixture
def example_document() -> str:
    """Two headed sections with 2 and 3 questions."""
    return "# A\nq1\nq2\n# B\nq3\nq4\nq5\n"


@pytest.fixture
def scripted():
    """Factory for deterministic random sources."""
    def _make(*draws: int) -> ScriptedRandom:
        return ScriptedRandom(draws)
    return _make


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    """Settings file location inside the test's temp dir."""
    return tmp_path / "config" / "settings.json"
