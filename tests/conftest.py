import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import kcse_scoreboard
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from kcse_scoreboard.catalog import default_catalog
from kcse_scoreboard.core.models import Grade, MarkEntry, ScoredResult


# Common test fixtures
@pytest.fixture
def catalog():
    """Return the bundled subject catalog."""
    return default_catalog()


@pytest.fixture
def mandatory_marks():
    """English, Kiswahili and Mathematics marks that all earn an A."""
    return [
        MarkEntry("101", 80),
        MarkEntry("102", 78),
        MarkEntry("121", 70),
    ]


@pytest.fixture
def scenario_marks(mandatory_marks):
    """
    Three mandatory A grades plus four optional subjects worth 9, 6, 4
    and 11 points. Total 66 points, mean 9.43, mean grade B.
    """
    return mandatory_marks + [
        MarkEntry("231", 65),   # BIOLOGY B, 9
        MarkEntry("232", 30),   # PHYSICS C, 6
        MarkEntry("233", 25),   # CHEMISTRY D+, 4
        MarkEntry("311", 75),   # HISTORY A-, 11
    ]


def make_result(code, name, points, mandatory=False, mark=50.0):
    """Build a ScoredResult with the grade implied by its points."""
    return ScoredResult(
        code=code,
        name=name,
        mark=mark,
        grade=Grade.from_points(points),
        points=points,
        mandatory=mandatory,
    )


@pytest.fixture
def result_factory():
    """Expose make_result to tests."""
    return make_result
