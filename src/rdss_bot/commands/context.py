from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..tiers import PrivilegeTier
from .emitter import ResponseEmitter
from .model import IncomingMessage, OutgoingResponse

if TYPE_CHECKING:
    from ..clients.trello import TicketingClient
    from ..monitoring import CoverageInterval


@dataclass(frozen=True, slots=True)
class Services:
    """Long-lived collaborators shared by every command invocation."""

    emitter: ResponseEmitter
    ticketing: "TicketingClient"
    coverage: "CoverageInterval"
    prefix: str


@dataclass(frozen=True, slots=True)
class CommandContext:
    """Everything a handler needs to act on one message."""

    message: IncomingMessage
    tier: PrivilegeTier
    services: Services

    def reply(self, body: str) -> OutgoingResponse:
        return self.services.emitter.emit(self.message, body)
