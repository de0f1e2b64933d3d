import logging

import discord

from rdss_bot.commands import CommandDispatcher

logger = logging.getLogger(__name__)


async def handle(client: discord.Client, dispatcher: CommandDispatcher):
    """Log the login identity and the active command surface."""
    logger.info(f"Logged in as {client.user.name} (ID: {client.user.id})")

    prefix = dispatcher.services.prefix
    for tier, commands in dispatcher.grammar.by_tier.items():
        names = ", ".join(f"{prefix}{c.name}" for c in commands)
        logger.info("Tier %s commands: %s", tier.name, names or "none")
    logger.info(
        "Coverage check interval: %d minute(s)", dispatcher.services.coverage.minutes
    )
