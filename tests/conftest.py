"""
Pytest configuration file for the facade demo.
Puts the project root on the Python path and provides fakes for the
Streamlit session state and the settings cache.
"""
import sys
import logging
import types
from pathlib import Path

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


EXPECTED_OUTPUT = (
    "Facade initializes subsystems:\n"
    "Subsystem1: Ready!\n"
    "Subsystem2: Get ready!\n"
    "Facade orders subsystems to perform the action:\n"
    "Subsystem1: Go!\n"
    "Subsystem2: Fire!\n"
)


@pytest.fixture
def expected_output():
    return EXPECTED_OUTPUT


@pytest.fixture
def fake_session_state(monkeypatch):
    """
    Replace st.session_state in the service registry with a plain dict,
    so session caching can be exercised without a Streamlit runtime.
    """
    session_state = {}
    fake_st = types.SimpleNamespace(session_state=session_state)
    monkeypatch.setattr("state.service_registry.st", fake_st)
    return session_state


@pytest.fixture
def fresh_settings():
    """Clear the module-level settings cache before and after a test."""
    from settings_service import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def restore_logging():
    """Undo logging.disable() and level changes made by the CLI."""
    from cli import APP_LOGGERS

    yield
    logging.disable(logging.NOTSET)
    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)
