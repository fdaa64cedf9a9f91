"""
Domain Models Package

Core types shared by the subsystems and the facade.

Key Components:
- Enums: Ownership (owned vs borrowed)
- Models: SubsystemSlot tagged-ownership wrapper, Releasable protocol
"""

from domain.enums import Ownership
from domain.models import Releasable, SubsystemSlot

__all__ = [
    # Enums
    "Ownership",
    # Models
    "Releasable",
    "SubsystemSlot",
]
