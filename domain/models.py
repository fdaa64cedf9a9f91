"""
Domain Models

Dataclasses representing the lifetime bookkeeping of the facade layer.

Design Principles:
1. Ownership is tagged once, at construction, and never renegotiated
2. Teardown dispatches on the tag instead of checking at runtime
3. Release is idempotent, so a slot can never release twice
"""

from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

from domain.enums import Ownership


class Releasable(Protocol):
    """Anything with a lifecycle hook the owner calls on teardown."""

    def release(self) -> None: ...


S = TypeVar("S", bound=Releasable)


# =============================================================================
# SubsystemSlot - Tagged ownership wrapper
# =============================================================================

@dataclass
class SubsystemSlot(Generic[S]):
    """
    Holds one subsystem instance together with its ownership tag.

    Attributes:
        instance: The subsystem instance (never None)
        ownership: OWNED if the holder created it, BORROWED otherwise
        released: True once an owned instance has been released
    """
    instance: S
    ownership: Ownership
    released: bool = field(default=False, init=False)

    @property
    def is_owned(self) -> bool:
        return self.ownership is Ownership.OWNED

    def release(self) -> bool:
        """
        Release the instance if and only if this slot owns it.

        Borrowed instances are left untouched. A second call on an owned
        slot does nothing.

        Returns:
            True if the instance was released by this call
        """
        if not self.is_owned or self.released:
            return False
        self.instance.release()
        self.released = True
        return True
