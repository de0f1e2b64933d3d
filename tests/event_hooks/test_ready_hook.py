import asyncio
import logging
from types import SimpleNamespace

from rdss_bot.commands import build_dispatcher
from rdss_bot.event_hooks import ready_hook


def test_ready_hook_logs_command_surface(caplog):
    caplog.set_level(logging.INFO, logger="rdss_bot")
    dispatcher = build_dispatcher(
        SimpleNamespace(COMMAND_PREFIX="rdss:", ENABLE_COVERAGE_TIMER=False, COVERAGE_CHECK_MINUTES=10),
        SimpleNamespace(BY_TIER={"management": ["Server Manager"]}),
        SimpleNamespace(
            API_URL="https://api.trello.com/1",
            BOARD_ID="b",
            TRELLO_KEY="k",
            TRELLO_ACCESS_TOKEN="t",
            TIMEOUT_SECONDS=0,
        ),
    )
    client = SimpleNamespace(user=SimpleNamespace(name="rdss", id=999))

    asyncio.run(ready_hook.handle(client, dispatcher))

    messages = [r.getMessage() for r in caplog.records]
    assert "Logged in as rdss (ID: 999)" in messages
    assert "Tier MANAGEMENT commands: rdss:help, rdss:?" in messages
    assert "Tier INTERNAL_AFFAIRS commands: rdss:history" in messages
