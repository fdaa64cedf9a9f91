"""
Domain Enums

Enumerations for categorical data used by the facade layer.
"""

from enum import Enum, auto


class Ownership(Enum):
    """
    Who is responsible for releasing a subsystem instance.

    - OWNED: created by the facade, released by the facade on teardown
    - BORROWED: supplied by the caller, who keeps responsibility for it
    """
    OWNED = auto()
    BORROWED = auto()

    @classmethod
    def for_supplied(cls, instance: object) -> "Ownership":
        """
        Determine ownership from a constructor argument.

        Args:
            instance: The instance passed to the facade, or None

        Returns:
            BORROWED if an instance was supplied, OWNED if the facade
            must create its own
        """
        return cls.OWNED if instance is None else cls.BORROWED

    @property
    def display_name(self) -> str:
        """Return human-readable ownership name."""
        return {
            Ownership.OWNED: "Facade-owned",
            Ownership.BORROWED: "Borrowed",
        }[self]
