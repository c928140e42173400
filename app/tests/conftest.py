import sys
from pathlib import Path

import pytest
import structlog

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `localization.registry`) works during pytest collection when
# pytest is invoked from a directory other than the project root.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)


@pytest.fixture(autouse=True)
def clear_log_context():
    """Keep structlog context variables from leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
