"""
Tests for the client module: client_code() and the two usage modes.
"""
import io

import pytest
from unittest.mock import Mock, patch

from client import client_code, run_borrowed, run_owned, run_demo


class TestClientCode:
    def test_writes_operation_result_verbatim(self):
        facade = Mock()
        facade.operation.return_value = "result\n"
        out = io.StringIO()

        client_code(facade, out)

        assert out.getvalue() == "result\n"
        facade.operation.assert_called_once_with()

    def test_defaults_to_stdout(self, capsys, expected_output):
        from facades import Facade

        client_code(Facade())

        assert capsys.readouterr().out == expected_output


class TestUsageModes:
    def test_run_borrowed_output(self, expected_output):
        out = io.StringIO()
        run_borrowed(out)
        assert out.getvalue() == expected_output

    def test_run_owned_output(self, expected_output):
        out = io.StringIO()
        run_owned(out)
        assert out.getvalue() == expected_output

    @patch("client.Subsystem2")
    @patch("client.Subsystem1")
    def test_run_borrowed_client_releases_its_subsystems(self, mock_s1_cls, mock_s2_cls):
        s1, s2 = mock_s1_cls.return_value, mock_s2_cls.return_value
        s1.operation1.return_value = ""
        s1.operation_n.return_value = ""
        s2.operation1.return_value = ""
        s2.operation_z.return_value = ""

        run_borrowed(io.StringIO())

        s1.release.assert_called_once_with()
        s2.release.assert_called_once_with()


    @patch("client.Subsystem2")
    @patch("client.Subsystem1")
    def test_run_borrowed_releases_when_write_fails(self, mock_s1_cls, mock_s2_cls):
        class BrokenOut:
            def write(self, text):
                raise BrokenPipeError("reader went away")

        s1, s2 = mock_s1_cls.return_value, mock_s2_cls.return_value
        s1.operation1.return_value = ""
        s1.operation_n.return_value = ""
        s2.operation1.return_value = ""
        s2.operation_z.return_value = ""

        with pytest.raises(BrokenPipeError):
            run_borrowed(BrokenOut())

        s1.release.assert_called_once_with()
        s2.release.assert_called_once_with()


class TestRunDemo:
    def test_writes_both_configurations(self, capsys, expected_output):
        status = run_demo()

        assert status == 0
        assert capsys.readouterr().out == expected_output + "\n" + expected_output

    def test_writes_to_given_stream(self, expected_output):
        out = io.StringIO()
        run_demo(out)
        assert out.getvalue() == expected_output + "\n" + expected_output
