"""
Facade

Provides a simple interface to the two subsystems. The facade delegates
client requests to the subsystems and is responsible for the lifetime of
any subsystem it creates itself. Clients only ever see operation().

This facade orchestrates:
- Subsystem1 ("ready" / "go")
- Subsystem2 ("get ready" / "fire")

Ownership:
    Depending on the caller's needs, the facade is either given existing
    subsystem objects or creates its own. Supplied objects are borrowed
    and never released by the facade; created objects are owned and are
    released exactly once, by close() or when the facade is collected. The caller must keep borrowed
    objects alive for as long as the facade uses them.

Example Usage:
```python
from facades import Facade
from subsystems import Subsystem1, Subsystem2

# Facade creates and owns its subsystems
with Facade() as facade:
    print(facade.operation(), end="")

# Facade borrows the caller's subsystems
s1, s2 = Subsystem1(), Subsystem2()
with Facade(s1, s2) as facade:
    print(facade.operation(), end="")
s1.release()
s2.release()
```
"""

from typing import Optional
import logging
import weakref

from domain import Ownership, SubsystemSlot
from logging_config import setup_logging
from subsystems import Subsystem1, Subsystem2

logger = setup_logging(__name__, log_file="facade.log")

INIT_HEADER = "Facade initializes subsystems:\n"
ACTION_HEADER = "Facade orders subsystems to perform the action:\n"

FACADE_SESSION_KEY = "facade"


def _release_slots(log: logging.Logger, *named_slots: tuple[str, SubsystemSlot]) -> None:
    """Release the owned slots; runs at most once per facade."""
    released = [name for name, slot in named_slots if slot.release()]
    log.debug(f"Facade closed, released: {released or 'nothing'}")


class Facade:
    """
    Facade over Subsystem1 and Subsystem2.

    Each subsystem sits in a SubsystemSlot tagged OWNED or BORROWED at
    construction time. Teardown dispatches on that tag, so a borrowed
    subsystem is never released and an owned one is never leaked.

    ## Operations
    - operation() - run both subsystems in the fixed order
    - close() - release owned subsystems (idempotent)

    ## Accessors
    - subsystem1 / subsystem2 - the subsystem instances
    - owns_subsystem1 / owns_subsystem2 - ownership flags
    - closed - whether close() has run
    """

    def __init__(
        self,
        subsystem1: Optional[Subsystem1] = None,
        subsystem2: Optional[Subsystem2] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the facade with optional subsystem instances.

        Args:
            subsystem1: Borrowed Subsystem1 (a facade-owned one is created if None)
            subsystem2: Borrowed Subsystem2 (a facade-owned one is created if None)
            logger: Optional logger instance
        """
        self._logger = logger or logging.getLogger(__name__)
        self._slot1 = SubsystemSlot(
            subsystem1 if subsystem1 is not None else Subsystem1(),
            Ownership.for_supplied(subsystem1),
        )
        self._slot2 = SubsystemSlot(
            subsystem2 if subsystem2 is not None else Subsystem2(),
            Ownership.for_supplied(subsystem2),
        )
        # Refers to the slots, never to self, so an unclosed facade is still collected
        self._finalizer = weakref.finalize(
            self,
            _release_slots,
            self._logger,
            ("subsystem1", self._slot1),
            ("subsystem2", self._slot2),
        )
        self._logger.debug(
            f"Facade created: subsystem1={self._slot1.ownership.name}, "
            f"subsystem2={self._slot2.ownership.name}"
        )

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def subsystem1(self) -> Subsystem1:
        return self._slot1.instance

    @property
    def subsystem2(self) -> Subsystem2:
        return self._slot2.instance

    @property
    def owns_subsystem1(self) -> bool:
        return self._slot1.is_owned

    @property
    def owns_subsystem2(self) -> bool:
        return self._slot2.is_owned

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    # =========================================================================
    # Composite Operation
    # =========================================================================

    def operation(self) -> str:
        """
        Run both subsystems in the fixed order and return their combined output.

        Order: Subsystem1.operation1, Subsystem2.operation1,
        Subsystem1.operation_n, Subsystem2.operation_z.

        Returns:
            Two header lines interleaved with the four subsystem results
        """
        result = INIT_HEADER
        result += self.subsystem1.operation1()
        result += self.subsystem2.operation1()
        result += ACTION_HEADER
        result += self.subsystem1.operation_n()
        result += self.subsystem2.operation_z()
        return result

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """
        Release every subsystem this facade owns.

        Borrowed subsystems are left to the caller. Calling close() again
        does nothing. A facade garbage collected without being closed
        releases its owned subsystems at that point.
        """
        self._finalizer()

    def __enter__(self) -> "Facade":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Facade(subsystem1={self._slot1.ownership.name}, "
            f"subsystem2={self._slot2.ownership.name}, closed={self.closed})"
        )


# =============================================================================
# Factory Functions - Streamlit Session State Integration
# =============================================================================


def get_facade(
    logger: Optional[logging.Logger] = None,
    use_session_state: bool = True,
) -> Facade:
    """
    Get or create a Facade with facade-owned subsystems.

    By default the facade is cached in session state so Streamlit reruns
    reuse it. Outside Streamlit (tests, CLI) pass use_session_state=False
    to get a fresh facade; the caller then closes it.

    Args:
        logger: Optional logger instance
        use_session_state: If True, cache the facade in st.session_state

    Returns:
        Facade instance (cached or new)

    Session State Key:
        The facade is stored in st.session_state['facade']
    """
    if use_session_state:
        from state import get_service
        return get_service(FACADE_SESSION_KEY, lambda: Facade(logger=logger))
    return Facade(logger=logger)


def reset_facade() -> bool:
    """
    Close and evict the session-cached facade.

    The next get_facade() call builds a new one.

    Returns:
        True if a cached facade was closed
    """
    from state import has_service, pop_service

    if not has_service(FACADE_SESSION_KEY):
        return False
    pop_service(FACADE_SESSION_KEY).close()
    logger.info("Session facade reset")
    return True
