import signal
from unittest.mock import MagicMock, patch

import pytest

from core.config import PurgeConfig, Settings
from purger.main import build_parser, main, run_scheduled
from purger.observers import MetricsObserver


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in list(Settings.model_fields):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def test_parser_defaults_leave_settings_untouched():
    args = build_parser().parse_args([])

    assert args.days is None
    assert args.run_now is None
    assert args.swarm is None


def test_parser_short_options():
    args = build_parser().parse_args(["-d", "2", "-i", "0 3 * * *", "-z", "UTC", "-r", "-s"])

    assert args.days == 2
    assert args.interval == "0 3 * * *"
    assert args.timezone == "UTC"
    assert args.run_now is True
    assert args.swarm is True


@pytest.mark.parametrize("days", ["-1", "nan", "inf", "1e10"])
def test_main_rejects_invalid_configuration(days):
    with patch("purger.main.docker_manager") as manager:
        assert main(["-r", "--days", days]) == 2

    manager.init.assert_not_called()


@pytest.mark.parametrize("success, code", [(True, 0), (False, 1)])
def test_main_run_now_executes_one_cycle(success, code):
    orchestrator = MagicMock()
    orchestrator.purge.return_value.success = success

    with (
        patch("purger.main.docker_manager") as manager,
        patch("purger.main.setup_logger"),
        patch("purger.main.PurgeOrchestrator", return_value=orchestrator) as cls,
    ):
        assert main(["-r", "-d", "2", "--include", "web-", "--exclude", "web-staging"]) == code

    config = cls.call_args.args[0]
    assert config.age_days == 2
    assert config.include_pattern.pattern == "web-"
    assert config.exclude_pattern.pattern == "web-staging"
    orchestrator.purge.assert_called_once_with()
    manager.init.assert_called_once()
    manager.close.assert_called_once()


def test_main_scheduled_mode_starts_daemon():
    with (
        patch("purger.main.docker_manager"),
        patch("purger.main.setup_logger"),
        patch("purger.main.PurgeOrchestrator"),
        patch("purger.main.run_scheduled", return_value=0) as run_scheduled,
    ):
        assert main(["-i", "30 2 * * *", "-z", "Europe/Prague"]) == 0

    config = run_scheduled.call_args.args[1]
    assert config.schedule == "30 2 * * *"
    assert config.timezone == "Europe/Prague"


def test_main_connects_with_the_settings_it_loaded(monkeypatch):
    # the command line overrides an invalid value from the environment
    monkeypatch.setenv("PURGE_SCHEDULE", "garbage")
    monkeypatch.setenv("DOCKER_BASE_URL", "tcp://docker:2375")
    monkeypatch.setenv("DOCKER_TIMEOUT", "15")
    orchestrator = MagicMock()
    orchestrator.purge.return_value.success = True

    with (
        patch("purger.main.docker_manager") as manager,
        patch("purger.main.setup_logger"),
        patch("purger.main.PurgeOrchestrator", return_value=orchestrator),
    ):
        assert main(["-r", "-i", "0 0 * * *"]) == 0

    manager.init.assert_called_once_with("tcp://docker:2375", 15)


def test_run_scheduled_stops_daemon_on_signal():
    handlers = {}
    daemon = MagicMock()
    # deliver SIGTERM as soon as the daemon starts
    daemon.start.side_effect = lambda: handlers[signal.SIGTERM](signal.SIGTERM, None)

    with (
        patch("purger.main.signal.signal", side_effect=handlers.__setitem__),
        patch("purger.main.PurgeDaemon", return_value=daemon) as cls,
    ):
        assert run_scheduled(MagicMock(), PurgeConfig(), MetricsObserver()) == 0

    assert set(handlers) == {signal.SIGTERM, signal.SIGINT}
    assert cls.call_args.args[1:] == ("0 0 * * *", "America/Los_Angeles")
    daemon.stop.assert_called_once_with()
    daemon.join.assert_called_once_with(timeout=10)
