"""
Tests for Subsystem1 and Subsystem2

The subsystems are stateless: fixed results, no failure modes, and a
release hook that leaves the instance usable.
"""
import logging

from subsystems import Subsystem1, Subsystem2


class TestSubsystem1:
    def test_operation1_reports_ready(self):
        assert Subsystem1().operation1() == "Subsystem1: Ready!\n"

    def test_operation_n_reports_go(self):
        assert Subsystem1().operation_n() == "Subsystem1: Go!\n"

    def test_results_do_not_depend_on_call_count(self):
        subsystem = Subsystem1()
        first = [subsystem.operation1(), subsystem.operation_n()]
        second = [subsystem.operation1(), subsystem.operation_n()]
        assert first == second

    def test_release_logs_at_debug(self, caplog):
        subsystem = Subsystem1()
        with caplog.at_level(logging.DEBUG, logger="subsystems.subsystem1"):
            subsystem.release()
        assert "Subsystem1" in caplog.text
        assert "released" in caplog.text


class TestSubsystem2:
    def test_operation1_reports_get_ready(self):
        assert Subsystem2().operation1() == "Subsystem2: Get ready!\n"

    def test_operation_z_reports_fire(self):
        assert Subsystem2().operation_z() == "Subsystem2: Fire!\n"

    def test_release_returns_none(self):
        assert Subsystem2().release() is None
