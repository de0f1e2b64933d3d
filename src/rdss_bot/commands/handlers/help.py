from __future__ import annotations

from ..context import CommandContext

HELP_BANNER = "**Roblox Discord Services | Help**"


async def handle(ctx: CommandContext) -> None:
    """Reply with the help banner and the command prefix."""

    prefix = ctx.services.prefix
    ctx.reply(
        f"{HELP_BANNER}"
        f"\nPrefix for all commands: `{prefix}<command>`"
        "\nNothing to see here..."
    )
