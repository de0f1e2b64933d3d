"""
Prefix-command routing for the bot.

The grammar is a closed table built in :mod:`.grammar`; there is no plugin
discovery. :func:`build_dispatcher` wires the grammar, role resolver and
shared services from the loaded configuration sections.
"""

from __future__ import annotations

import logging

from ..clients.trello import TicketingClient
from ..monitoring import CoverageInterval
from ..tiers import RoleResolver
from .context import CommandContext, Services
from .emitter import ResponseEmitter
from .grammar import Command, CommandGrammar, build_grammar
from .dispatcher import CommandDispatcher, DispatchOutcome
from .model import IncomingMessage, Member, OutgoingResponse, Role

logger = logging.getLogger(__name__)


def build_dispatcher(core, roles, ticketing) -> CommandDispatcher:
    """Create a dispatcher from the ``core``, ``roles`` and ``ticketing`` config sections."""

    grammar = build_grammar(
        core.COMMAND_PREFIX, enable_coverage_timer=core.ENABLE_COVERAGE_TIMER
    )
    services = Services(
        emitter=ResponseEmitter(),
        ticketing=TicketingClient.from_config(ticketing),
        coverage=CoverageInterval(core.COVERAGE_CHECK_MINUTES),
        prefix=core.COMMAND_PREFIX,
    )
    resolver = RoleResolver.from_config(roles.BY_TIER)

    if core.ENABLE_COVERAGE_TIMER:
        logger.info("set_coverage_timer command enabled")
    logger.info(
        "Command grammar ready: %s",
        ", ".join(
            f"{tier.name}={len(cmds)}" for tier, cmds in grammar.by_tier.items()
        ),
    )
    return CommandDispatcher(resolver, grammar, services)


__all__ = [
    "Command",
    "CommandContext",
    "CommandDispatcher",
    "CommandGrammar",
    "DispatchOutcome",
    "IncomingMessage",
    "Member",
    "OutgoingResponse",
    "ResponseEmitter",
    "Role",
    "Services",
    "build_dispatcher",
    "build_grammar",
]
