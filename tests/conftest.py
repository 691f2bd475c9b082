"""
Pytest configuration for gltypes tests.
Adds the src directory to sys.path so the tests run without an install.
"""
import sys
from pathlib import Path

import pytest

# Add src to the path so 'import gltypes' works from a checkout, and the
# project root so 'from tests.test_fixtures import ...' resolves
project_root = Path(__file__).parent.parent
for path in (project_root / "src", project_root):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from gltypes.config import reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()
