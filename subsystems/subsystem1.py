"""
Subsystem1

First of the two subsystems behind the facade. It can accept requests
either from the facade or from a client directly; to the subsystem the
facade is just another client.

Design:
- Stateless, every operation returns a fixed status line
- release() is the lifecycle hook the owner calls on teardown
- No Streamlit imports (subsystem layer rule)
"""

from logging_config import setup_logging

logger = setup_logging(__name__, log_file="subsystems.log")


class Subsystem1:
    """Subsystem that reports the "ready" and "go" states."""

    def operation1(self) -> str:
        return "Subsystem1: Ready!\n"

    def operation_n(self) -> str:
        return "Subsystem1: Go!\n"

    def release(self) -> None:
        logger.debug(f"Subsystem1 {id(self):#x} released")
