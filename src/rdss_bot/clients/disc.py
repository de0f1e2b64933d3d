"""Discord bot bootstrap utilities."""

from __future__ import annotations

import logging

import discord

from rdss_bot import commands as rdss_commands
from rdss_bot.config import core, roles, ticketing
from rdss_bot.event_hooks import message_hook, ready_hook

logger = logging.getLogger(__name__)

# --- Intents --------------------------------------------------------------- #
# Prefix commands need message text; tier resolution needs member roles.
intents = discord.Intents.default()
intents.message_content = True
intents.members = True


class RdssBot(discord.Client):
    """Discord client routing prefixed text commands by privilege tier."""

    def __init__(self, dispatcher: rdss_commands.CommandDispatcher | None = None) -> None:
        super().__init__(intents=intents)
        self.dispatcher = dispatcher or rdss_commands.build_dispatcher(core, roles, ticketing)

    async def on_ready(self) -> None:
        await ready_hook.handle(self, self.dispatcher)

    async def on_message(self, message: discord.Message) -> None:
        await message_hook.handle(self, self.dispatcher, message)

    async def close(self) -> None:
        await self.dispatcher.services.emitter.drain()
        await super().close()


def run() -> None:
    """Start the Discord bot using configuration from the environment."""

    if not core.DISCORD_API_TOKEN:
        logger.error("No DISCORD_API_TOKEN configured. Cannot run client.")
        return

    bot = RdssBot()
    try:
        bot.run(core.DISCORD_API_TOKEN, log_handler=None)
    except discord.LoginFailure as exc:
        logger.error("Login failed: %s", exc)
    except Exception as exc:  # pragma: no cover - defensive guard
        logger.exception("Unexpected error while running client: %s", exc)
