"""
Facade Layer

Provides a simplified, high-level interface over the subsystems, hiding
the order in which they must be driven and who releases them.

Patterns Applied:
1. Facade Pattern - Single entry point to several subsystems
2. Dependency Injection - Subsystems injected (borrowed) or created (owned)
3. Session State Integration - One cached facade per Streamlit session
4. Factory Functions - Simplified instantiation

Main Components:
- Facade: Unified interface over Subsystem1 and Subsystem2
- get_facade(): Factory function with session state integration
- reset_facade(): Close and evict the session facade
"""

from facades.facade import (
    Facade,
    get_facade,
    reset_facade,
    INIT_HEADER,
    ACTION_HEADER,
)

__all__ = [
    'Facade',
    'get_facade',
    'reset_facade',
    'INIT_HEADER',
    'ACTION_HEADER',
]
