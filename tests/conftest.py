"""
Pytest configuration for variant persistence tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from world.variant_persist.config import reset_config  # noqa: E402
from tests.helpers import make_catalog  # noqa: E402


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends on the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def catalog():
    """
    Loaded parts for a small editor session.

    wingA: red, white
    tankB: short, long
    """
    return make_catalog({
        "wingA": ["red", "white"],
        "tankB": ["short", "long"],
    })


@pytest.fixture
def defaults_yaml():
    return project_root / "config" / "variant_persist_defaults.yaml"
