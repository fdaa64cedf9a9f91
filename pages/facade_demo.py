"""
Facade Demo Page

Streamlit page acting as the facade's client. Shows the composite output
for both configurations:
- Borrowed: the page builds the subsystems and lends them to a facade
- Facade-owned: one facade per session, cached in session state
"""

import sys
import os

# Add the parent directory to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import io

import streamlit as st
from logging_config import setup_logging
from client import client_code, run_borrowed
from facades import get_facade, reset_facade

logger = setup_logging(__name__, log_file="facade_demo.log")


def borrowed_section() -> None:
    st.subheader("Borrowed subsystems")
    st.caption("The page creates Subsystem1 and Subsystem2 and releases them after the facade is closed.")
    buffer = io.StringIO()
    run_borrowed(buffer)
    st.code(buffer.getvalue(), language=None)


def owned_section() -> None:
    st.subheader("Facade-owned subsystems")
    facade = get_facade()
    st.caption(f"Cached for this session: {facade!r}")
    buffer = io.StringIO()
    client_code(facade, buffer)
    st.code(buffer.getvalue(), language=None)

    if st.button("Reset session facade"):
        reset_facade()
        logger.info("Session facade reset from page")
        st.rerun()


def main():
    st.title("Facade Demo")
    st.markdown("*One call on the facade drives both subsystems in a fixed order*")
    st.divider()

    borrowed_section()
    st.divider()

    owned_section()


if __name__ == "__main__":
    main()
