"""
Tier-scoped command grammar.

Every candidate command must first pass the gate: the configured prefix
followed by at least one non-space character. After that, each tier owns an
ordered tuple of :class:`Command` entries tried top to bottom. Tiers are
separate buckets; a command listed for one tier is not visible to any other.

Tiers absent from the grammar have no commands and never reply.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Awaitable, Callable, Mapping, Optional, Pattern, Tuple

from ..tiers import PrivilegeTier
from .context import CommandContext
from .handlers import coverage_timer, history, unknown
from .handlers import help as help_cmd

Handler = Callable[[CommandContext], Awaitable[object]]


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    pattern: Pattern[str]
    handler: Handler

    def matches(self, text: str) -> bool:
        return self.pattern.fullmatch(text) is not None


def _command(name: str, prefix: str, body: str, handler: Handler) -> Command:
    return Command(name, re.compile(re.escape(prefix) + body), handler)


@dataclass(frozen=True)
class CommandGrammar:
    gate: Pattern[str]
    by_tier: Mapping[PrivilegeTier, Tuple[Command, ...]]
    unknown: Handler

    def is_command(self, text: str) -> bool:
        return self.gate.fullmatch(text) is not None

    def commands_for(self, tier: PrivilegeTier) -> Tuple[Command, ...]:
        return self.by_tier.get(tier, ())

    def match(self, tier: PrivilegeTier, text: str) -> Optional[Command]:
        """Return the first command in ``tier`` matching ``text``."""
        for command in self.commands_for(tier):
            if command.matches(text):
                return command
        return None


def build_grammar(prefix: str, *, enable_coverage_timer: bool = False) -> CommandGrammar:
    gate = re.compile(re.escape(prefix) + r"\S.*")

    management = []
    if enable_coverage_timer:
        management.append(
            _command("set_coverage_timer", prefix, r"set_coverage_timer(?:\s.*)?", coverage_timer.handle)
        )
    management += [
        _command("help", prefix, r"help", help_cmd.handle),
        _command("?", prefix, r"\?", help_cmd.handle),
    ]

    internal_affairs = [
        _command("history", prefix, r"(?:history|ia)", history.handle),
    ]

    by_tier = {
        PrivilegeTier.MANAGEMENT: tuple(management),
        PrivilegeTier.INTERNAL_AFFAIRS: tuple(internal_affairs),
    }
    return CommandGrammar(gate=gate, by_tier=MappingProxyType(by_tier), unknown=unknown.handle)


__all__ = ["Command", "CommandGrammar", "Handler", "build_grammar"]
