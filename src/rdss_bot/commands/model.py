"""Platform-neutral views of inbound and outbound chat messages."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Any, Protocol, Tuple


class Channel(Protocol):
    async def send(self, content: str) -> Any: ...


@dataclass(frozen=True, slots=True)
class Role:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Member:
    id: int
    name: str
    mention: str
    roles: Tuple[Role, ...] = ()


@dataclass(frozen=True, slots=True)
class IncomingMessage:
    author: Member
    content: str
    channel: Channel
    created_at: datetime.datetime | None = None
    from_self: bool = False


@dataclass(frozen=True, slots=True)
class OutgoingResponse:
    channel: Channel = field(repr=False)
    content: str
