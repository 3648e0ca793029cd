import pytest
import sys
from pathlib import Path

# Put the repository root on sys.path so badge_print and run import
REPO_ROOT = Path(__file__).resolve().parent.parent
if REPO_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, REPO_ROOT.as_posix())

from badge_print.models import Margins, PaperSizeConfiguration


def make_config(size_type="A4", orientation="portrait", margin=10, **kwargs):
    """Build a configuration with the same margin on every side."""
    return PaperSizeConfiguration(
        size_type=size_type,
        orientation=orientation,
        margins=Margins(top=margin, right=margin, bottom=margin, left=margin),
        **kwargs,
    )


@pytest.fixture
def repo_root():
    return REPO_ROOT


@pytest.fixture
def a4_config():
    return make_config()
