"""
Service Registry

Centralized singleton management for facades and the objects they own.
Provides a clean interface for caching instances in session state so that
Streamlit reruns reuse one facade instead of building a new one each time.

This pattern keeps st.session_state coupling out of the facade and
subsystem layers.
"""

import streamlit as st
from typing import TypeVar, Callable, Any

T = TypeVar('T')


def get_service(service_name: str, factory: Callable[[], T]) -> T:
    """Get or create an instance in session state.

    Args:
        service_name: Unique key for the instance in session state
        factory: Zero-argument callable that creates the instance

    Returns:
        The instance (either cached or newly created)

    Example:
        def get_facade() -> Facade:
            from state import get_service
            return get_service('facade', Facade)
    """
    if service_name not in st.session_state:
        st.session_state[service_name] = factory()
    return st.session_state[service_name]


def pop_service(service_name: str) -> Any:
    """Remove an instance from session state and hand it back.

    The caller becomes responsible for the returned instance (for a
    facade, that means closing it).

    Returns:
        The removed instance, or None if nothing was registered
    """
    if service_name not in st.session_state:
        return None
    instance = st.session_state[service_name]
    del st.session_state[service_name]
    return instance


def has_service(service_name: str) -> bool:
    """Check if an instance is registered in session state."""
    return service_name in st.session_state
