"""
Subsystems Package

Independent components the facade sequences. Neither subsystem knows
about the facade or about the other subsystem.

Available Subsystems:
- Subsystem1: "ready" / "go"
- Subsystem2: "get ready" / "fire"
"""

from subsystems.subsystem1 import Subsystem1
from subsystems.subsystem2 import Subsystem2

__all__ = [
    'Subsystem1',
    'Subsystem2',
]
