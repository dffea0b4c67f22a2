"""Test the command-line interface."""

import pytest

from fuzzy_completing_read import cli
from fuzzy_completing_read import host
from fuzzy_completing_read.config.settings import current_settings


class FakeConfigManager:
    """ConfigManager stand-in that never touches the user's configuration."""

    def __init__(self, console=None):
        self.console = console

    def config_exists(self, config_name=None):
        return False

    def load_settings(self, config_name=None):
        raise AssertionError("no configuration should be loaded")


@pytest.fixture(autouse=True)
def no_user_config(monkeypatch):
    monkeypatch.setattr(cli, "ConfigManager", FakeConfigManager)


def test_selection_is_printed(monkeypatch, capsys):
    """Test that the selection is read with the given options and printed."""
    calls = []

    def reader(*args):
        calls.append((args, current_settings().max_items))
        return "green"

    monkeypatch.setattr(cli, "read_with_completion", reader)

    assert cli.main(["red", "green", "--default", "green", "--max-items", "5", "--require-match"]) == 0
    assert calls == [(("Select: ", ["red", "green"], None, True, None, None, "green"), 5)]
    assert "green" in capsys.readouterr().out


def test_repeated_default_becomes_list(monkeypatch):
    """Test that several --default options give a list default."""
    calls = []
    monkeypatch.setattr(cli, "read_with_completion", lambda *args: calls.append(args) or "a")

    cli.main(["a", "b", "--default", "b", "--default", "a", "--max-items", "0"])
    assert calls[0][6] == ["b", "a"]


def test_choices_file(monkeypatch, tmp_path):
    """Test that candidates are read from a file."""
    path = tmp_path / "choices.txt"
    path.write_text("one\n\ntwo\nthree\n")
    calls = []
    monkeypatch.setattr(cli, "read_with_completion", lambda *args: calls.append(args) or "two")

    assert cli.main(["--choices-file", str(path)]) == 0
    assert calls[0][1] == ["one", "two", "three"]


def test_missing_choices_file():
    """Test that a missing choices file is an error."""
    assert cli.main(["--choices-file", "/nonexistent/choices.txt"]) == 1


def test_no_candidates_is_a_usage_error():
    """Test that running without candidates exits with a usage error."""
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2


def test_standard_option_uses_standard_routine(monkeypatch):
    """Test that --standard bypasses the adapter."""
    calls = []
    monkeypatch.setattr(host, "completing_read_default", lambda *args: calls.append(args) or "x")
    monkeypatch.setattr(cli, "read_with_completion", lambda *args: pytest.fail("adapter used"))

    assert cli.main(["x", "y", "--standard"]) == 0
    assert calls[0][1] == ["x", "y"]


def test_cancelled_selection(monkeypatch):
    """Test that cancelling the prompt exits with 130."""
    def reader(*args):
        raise KeyboardInterrupt()

    monkeypatch.setattr(cli, "read_with_completion", reader)
    assert cli.main(["a"]) == 130
