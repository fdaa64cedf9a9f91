"""
Subsystem2

Second subsystem behind the facade. Some facades work with several
subsystems at once; this one is sequenced after Subsystem1.
"""

from logging_config import setup_logging

logger = setup_logging(__name__, log_file="subsystems.log")


class Subsystem2:
    """Subsystem that reports the "get ready" and "fire" states."""

    def operation1(self) -> str:
        return "Subsystem2: Get ready!\n"

    def operation_z(self) -> str:
        return "Subsystem2: Fire!\n"

    def release(self) -> None:
        logger.debug(f"Subsystem2 {id(self):#x} released")
