"""Tests for the command-line entry point."""

import io

import pytest
import requests

import main
from conftest import FakeResponse
from config.settings import Settings


def _settings(**overrides):
    settings = Settings(
        api_url="https://example.test/all",
        request_timeout=12,
        log_level="WARNING",
        log_file="",
        show_initial_listing=True
    )
    for key, value in overrides.items():
        setattr(settings, key, value)
    return settings


def test_parse_args_defaults_come_from_settings():
    args = main.parse_args([], settings=_settings())

    assert args.url == "https://example.test/all"
    assert args.timeout == 12
    assert args.log_level == "WARNING"
    assert args.no_listing is False


def test_parse_args_overrides():
    args = main.parse_args(
        ["--url", "http://localhost/all", "-t", "3", "--log-level", "debug", "--no-listing"],
        settings=_settings()
    )

    assert args.url == "http://localhost/all"
    assert args.timeout == 3.0
    assert args.log_level == "DEBUG"
    assert args.no_listing is True


def test_parse_args_rejects_unknown_log_level():
    with pytest.raises(SystemExit) as excinfo:
        main.parse_args(["--log-level", "chatty"], settings=_settings())
    assert excinfo.value.code == 2


def test_main_runs_session(fake_get):
    stdout = io.StringIO()
    code = main.main(
        url="https://example.test/all",
        show_initial_listing=False,
        stdin=io.StringIO("1\nGer\n3\n"),
        stdout=stdout
    )

    assert code == 0
    assert "Common Name: Germany" in stdout.getvalue()
    assert "Common Name: France" not in stdout.getvalue()


def test_main_returns_non_zero_on_fetch_failure(fake_get):
    fake_get.error = requests.ConnectionError("no route to host")
    stdout = io.StringIO()

    code = main.main(url="https://example.test/all", stdin=io.StringIO(""), stdout=stdout)

    assert code == 1
    assert "Error fetching countries: no route to host" in stdout.getvalue()


def test_main_reports_http_errors(fake_get):
    fake_get.response = FakeResponse({"message": "Bad Request"}, status_code=400)
    code = main.main(url="https://example.test/all", stdin=io.StringIO(""), stdout=io.StringIO())
    assert code == 1


def test_main_handles_keyboard_interrupt(monkeypatch, fake_get):
    def interrupt(self):
        raise KeyboardInterrupt

    monkeypatch.setattr("src.core.command_loop.CommandLoop.run", interrupt)
    assert main.main(url="https://example.test/all") == main.EXIT_INTERRUPTED


def test_setup_logging_adds_file_handler(tmp_path):
    import logging

    log_file = tmp_path / "explorer.log"
    main.setup_logging("INFO", str(log_file))
    try:
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
    finally:
        logging.getLogger().setLevel(logging.WARNING)
        for handler in logging.getLogger().handlers[:]:
            handler.close()
            logging.getLogger().removeHandler(handler)


@pytest.mark.parametrize("value", ["0", "-1", "nan", "abc"])
def test_parse_args_rejects_unusable_timeout(value):
    with pytest.raises(SystemExit) as excinfo:
        main.parse_args(["--timeout", value], settings=_settings())
    assert excinfo.value.code == 2


def test_main_reports_rejected_timeout(fake_get):
    fake_get.error = ValueError("Attempted to set connect timeout to 0")
    stdout = io.StringIO()

    code = main.main(url="http://127.0.0.1:9/all", timeout=0, stdin=io.StringIO(""), stdout=stdout)

    assert code == 1
    assert "Error fetching countries: Attempted to set connect timeout to 0" in stdout.getvalue()


def test_cli_runs_full_session(monkeypatch, capsys, fake_get):
    import logging

    monkeypatch.setattr("sys.stdin", io.StringIO("1\nfrance\n3\n"))
    try:
        code = main.cli(["--no-listing", "--url", "https://example.test/all", "--timeout", "4"])
    finally:
        logging.getLogger().setLevel(logging.WARNING)
        for handler in logging.getLogger().handlers[:]:
            logging.getLogger().removeHandler(handler)

    out = capsys.readouterr().out
    assert code == 0
    assert fake_get.calls[0][0] == "https://example.test/all"
    assert fake_get.calls[0][1]["timeout"] == 4.0
    assert "--- List of Countries ---" not in out
    assert "Common Name: France" in out
    assert "Common Name: Germany" not in out
