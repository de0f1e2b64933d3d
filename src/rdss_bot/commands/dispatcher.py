"""
Message -> command dispatch.

Pipeline per message, finished in a single pass:

1. Drop the bot's own messages.
2. Drop text that fails the command gate (no tier lookup, no logging).
3. Resolve the author's tier.
4. Tiers without commands stop here silently.
5. Run the first matching command, or the unknown-command handler.

:meth:`CommandDispatcher.dispatch` never raises. Handler errors are logged and
contained to the message that caused them.
"""

from __future__ import annotations

import enum
import logging

from ..tiers import RoleResolver
from .context import CommandContext, Services
from .grammar import CommandGrammar
from .model import IncomingMessage

logger = logging.getLogger(__name__)


class DispatchOutcome(enum.Enum):
    IGNORED_SELF = "ignored_self"
    NOT_A_COMMAND = "not_a_command"
    NO_COMMANDS_FOR_TIER = "no_commands_for_tier"
    HANDLED = "handled"
    UNKNOWN_COMMAND = "unknown_command"


class CommandDispatcher:
    def __init__(
        self,
        resolver: RoleResolver,
        grammar: CommandGrammar,
        services: Services,
    ) -> None:
        self.resolver = resolver
        self.grammar = grammar
        self.services = services

    async def dispatch(self, message: IncomingMessage) -> DispatchOutcome:
        if message.from_self:
            return DispatchOutcome.IGNORED_SELF

        text = message.content
        if not self.grammar.is_command(text):
            return DispatchOutcome.NOT_A_COMMAND

        tier = self.resolver.resolve(message.author.roles)
        logger.info(
            "Command received from %s (%s): %s",
            message.author.name,
            tier.name,
            text,
        )

        commands = self.grammar.commands_for(tier)
        if not commands:
            logger.debug("No commands defined for tier %s; ignoring", tier.name)
            return DispatchOutcome.NO_COMMANDS_FOR_TIER

        command = self.grammar.match(tier, text)
        if command is None:
            handler = self.grammar.unknown
            outcome = DispatchOutcome.UNKNOWN_COMMAND
        else:
            handler = command.handler
            outcome = DispatchOutcome.HANDLED

        ctx = CommandContext(message=message, tier=tier, services=self.services)
        try:
            await handler(ctx)
        except Exception:
            logger.exception(
                "Handler %s failed for message from %s",
                command.name if command else "unknown",
                message.author.name,
            )
        return outcome


__all__ = ["CommandDispatcher", "DispatchOutcome"]
