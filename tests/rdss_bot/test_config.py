import pytest

from rdss_bot.config.core import Core
from rdss_bot.config.loader import load_raw_config
from rdss_bot.config.roles import Roles
from rdss_bot.config.ticketing import Ticketing


def test_load_raw_config_missing_file_returns_empty(tmp_path):
    assert load_raw_config(tmp_path / "nope.toml") == {}


def test_load_raw_config_reads_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[rdss.commands]\nprefix = "cds:"\n', encoding="utf-8")

    assert load_raw_config(path) == {"rdss": {"commands": {"prefix": "cds:"}}}


def test_core_defaults_from_env(monkeypatch):
    monkeypatch.setenv("DISCORD_API_TOKEN", "abc")
    monkeypatch.delenv("RDSS_COMMAND_PREFIX", raising=False)
    monkeypatch.delenv("ENABLE_COVERAGE_TIMER", raising=False)
    monkeypatch.delenv("COVERAGE_CHECK_MINUTES", raising=False)

    core = Core({})

    assert core.DISCORD_API_TOKEN == "abc"
    assert core.COMMAND_PREFIX == "rdss:"
    assert core.ENABLE_COVERAGE_TIMER is False
    assert core.COVERAGE_CHECK_MINUTES == 10


def test_core_reads_toml_section(monkeypatch):
    monkeypatch.setenv("ENABLE_COVERAGE_TIMER", "false")
    cfg = {
        "rdss": {
            "commands": {
                "prefix": "cds:",
                "enable_coverage_timer": True,
                "coverage_check_minutes": 3,
            }
        }
    }

    core = Core(cfg)

    assert core.COMMAND_PREFIX == "cds:"
    assert core.ENABLE_COVERAGE_TIMER is True
    assert core.COVERAGE_CHECK_MINUTES == 3


def test_core_rejects_bad_interval():
    with pytest.raises(ValueError):
        Core({"rdss": {"commands": {"coverage_check_minutes": 0}}})


def test_roles_from_toml_and_env(monkeypatch):
    monkeypatch.setenv("ROLE_SUPERVISOR", "Mod, Helper ,")
    monkeypatch.delenv("ROLE_MANAGEMENT", raising=False)

    roles = Roles({"rdss": {"roles": {"internal_affairs": ["IA", "id:98765"]}}})

    assert roles.BY_TIER["internal_affairs"] == ["IA", "id:98765"]
    assert roles.BY_TIER["supervisor"] == ["Mod", "Helper"]
    assert roles.BY_TIER["management"] == ["Server Manager"]


def test_ticketing_warns_on_missing_credentials(monkeypatch, caplog):
    monkeypatch.delenv("TRELLO_KEY", raising=False)
    monkeypatch.setenv("TRELLO_ACCESS_TOKEN", "t")

    ticketing = Ticketing({"rdss": {"ticketing": {"board_id": "xyz", "timeout_seconds": 0}}})

    assert ticketing.TRELLO_KEY is None
    assert ticketing.BOARD_ID == "xyz"
    assert ticketing.TIMEOUT_SECONDS == 0
    assert any("TRELLO_KEY" in r.getMessage() for r in caplog.records)
