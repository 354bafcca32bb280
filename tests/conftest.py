"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import logging
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Drop handlers bound to streams that a test may have replaced."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
