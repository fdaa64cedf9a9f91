"""
State Management Module

Centralized state management for Streamlit session state.
This module belongs in the presentation layer and provides the service
registry used to keep one facade per browser session.

Usage:
    from state import get_service, pop_service, has_service
"""

from state.service_registry import (
    get_service,
    pop_service,
    has_service,
)

__all__ = [
    'get_service',
    'pop_service',
    'has_service',
]
