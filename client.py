"""
Client

Client code works with the subsystems only through the facade. When the
facade manages the subsystems' lifecycle the client need not know they
exist at all.
"""

import sys
from typing import Optional, TextIO

from facades import Facade
from logging_config import setup_logging
from subsystems import Subsystem1, Subsystem2

logger = setup_logging(__name__, log_file="client.log")


def client_code(facade: Facade, out: Optional[TextIO] = None) -> None:
    """Write the facade's composite output to out (stdout by default)."""
    out = out or sys.stdout
    out.write(facade.operation())


def run_borrowed(out: Optional[TextIO] = None) -> None:
    """Client builds the subsystems and lends them to the facade.

    The client keeps responsibility for the subsystems and releases them
    once the facade is done with them.
    """
    subsystem1 = Subsystem1()
    subsystem2 = Subsystem2()
    try:
        with Facade(subsystem1, subsystem2) as facade:
            client_code(facade, out)
    finally:
        subsystem1.release()
        subsystem2.release()
        logger.debug("Borrowed subsystems released by client")


def run_owned(out: Optional[TextIO] = None) -> None:
    """Facade builds and owns its subsystems."""
    with Facade() as facade:
        client_code(facade, out)


def run_demo(out: Optional[TextIO] = None) -> int:
    """Run both configurations back to back.

    Returns:
        Process exit status (always 0)
    """
    out = out or sys.stdout
    run_borrowed(out)
    out.write("\n")
    run_owned(out)
    logger.info("Demo finished")
    return 0
