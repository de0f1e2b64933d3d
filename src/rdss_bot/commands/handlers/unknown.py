from __future__ import annotations

from ..context import CommandContext


async def handle(ctx: CommandContext) -> None:
    prefix = ctx.services.prefix
    ctx.reply(
        "Sorry, I don't know that command."
        f"\n*Use {prefix}? or {prefix}help for assistance.*"
    )
