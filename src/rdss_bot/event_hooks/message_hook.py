import logging

import discord

from rdss_bot.commands import (
    CommandDispatcher,
    DispatchOutcome,
    IncomingMessage,
    Member,
    Role,
)

logger = logging.getLogger(__name__)


def to_incoming(client: discord.Client, message: discord.Message) -> IncomingMessage:
    """Adapt a discord.py message into the dispatcher's message view."""

    author = message.author
    # DMs carry a plain User without roles.
    raw_roles = getattr(author, "roles", None) or []
    roles = tuple(Role(id=r.id, name=r.name) for r in raw_roles)
    name = getattr(author, "display_name", None) or getattr(author, "name", str(author.id))

    return IncomingMessage(
        author=Member(id=author.id, name=name, mention=author.mention, roles=roles),
        content=message.content or "",
        channel=message.channel,
        created_at=getattr(message, "created_at", None),
        from_self=client.user is not None and author.id == client.user.id,
    )


async def handle(
    client: discord.Client, dispatcher: CommandDispatcher, message: discord.Message
) -> DispatchOutcome:
    """Handle incoming Discord messages."""

    # Skip our own messages before touching roles or channel data.
    if client.user is not None and message.author.id == client.user.id:
        return DispatchOutcome.IGNORED_SELF

    incoming = to_incoming(client, message)
    outcome = await dispatcher.dispatch(incoming)
    if outcome is not DispatchOutcome.NOT_A_COMMAND:
        logger.debug("Message %s dispatched: %s", message.id, outcome.value)
    return outcome
