"""
``set_coverage_timer <minutes>``: change the supervisor coverage check interval.

Only reachable when ``ENABLE_COVERAGE_TIMER`` is set. Bad arguments are
answered in-channel and never raised.
"""

from __future__ import annotations

import logging

from ..context import CommandContext

logger = logging.getLogger(__name__)


def _syntax(prefix: str) -> str:
    return f"`{prefix}set_coverage_timer 1-9999`"


async def handle(ctx: CommandContext) -> None:
    prefix = ctx.services.prefix
    tokens = ctx.message.content.split()

    try:
        minutes = int(tokens[1])
    except (IndexError, ValueError):
        ctx.reply(f"Incorrect value. SYNTAX: {_syntax(prefix)}")
        return

    if minutes <= 0:
        ctx.reply(
            "Supervisor Monitoring check interval must be at least 1 minute."
            f"\n[SYNTAX: {_syntax(prefix)}"
        )
        return

    ctx.services.coverage.set_minutes(minutes)
    logger.info("%s set coverage check interval to %d minutes", ctx.message.author.name, minutes)
    ctx.reply(
        f"Supervisor Monitoring check interval set to {minutes} minutes. "
        "Effective on next check."
    )
