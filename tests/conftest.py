# Standard Library
import os
import sys

# Third Party
import pytest

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

# local repo modules
from fuzzyplot.params import make_params  # noqa: E402


@pytest.fixture
def small_params():
    """An 80x80 view of (-2, -2)..(2, 2), so one pixel is 0.05 wide."""
    return make_params(80, 80)
