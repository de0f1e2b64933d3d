"""
Minimal Trello REST client used by the history command.

Only ``GET /boards/{board_id}/lists`` is used. Every failure (transport, HTTP
status, timeout, undecodable or mis-shaped JSON) surfaces as
:class:`TicketingError` so callers can apply a single policy.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

import aiohttp

logger = logging.getLogger(__name__)


class TicketingError(Exception):
    """Raised when board data cannot be fetched or decoded."""


@dataclass(frozen=True, slots=True)
class BoardList:
    """One list on a Trello board."""

    id: str
    name: str
    closed: bool = False
    pos: Optional[float] = None
    id_board: Optional[str] = None
    subscribed: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "BoardList":
        if not isinstance(data, dict):
            raise TicketingError(f"Expected a list object, got {type(data).__name__}")
        try:
            list_id = data["id"]
            name = data["name"]
        except KeyError as exc:
            raise TicketingError(f"Board list is missing field {exc.args[0]!r}") from exc

        pos = data.get("pos")
        return cls(
            id=str(list_id),
            name=str(name),
            closed=bool(data.get("closed", False)),
            pos=float(pos) if isinstance(pos, (int, float)) else None,
            id_board=data.get("idBoard"),
            subscribed=bool(data.get("subscribed") or False),
        )


def decode_board_lists(body: bytes | str) -> List[BoardList]:
    """Decode a JSON array of board lists from a UTF-8 response body."""
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TicketingError(f"Response from ticketing service is not UTF-8: {exc}") from exc

    try:
        payload = json.loads(body)
    except json.JSONDecodeError as exc:
        raise TicketingError(f"Invalid JSON from ticketing service: {exc}") from exc

    if not isinstance(payload, list):
        raise TicketingError(
            f"Expected a JSON array of lists, got {type(payload).__name__}"
        )
    return [BoardList.from_dict(item) for item in payload]


class TicketingClient:
    def __init__(
        self,
        *,
        api_url: str,
        board_id: str,
        key: str | None,
        token: str | None,
        timeout_seconds: float = 0,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.board_id = board_id
        self._key = key
        self._token = token
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds or None)

    @classmethod
    def from_config(cls, cfg) -> "TicketingClient":
        return cls(
            api_url=cfg.API_URL,
            board_id=cfg.BOARD_ID,
            key=cfg.TRELLO_KEY,
            token=cfg.TRELLO_ACCESS_TOKEN,
            timeout_seconds=cfg.TIMEOUT_SECONDS,
        )

    @property
    def lists_url(self) -> str:
        return f"{self.api_url}/boards/{self.board_id}/lists"

    async def _get_lists_body(self) -> bytes:
        """Perform the HTTP request and return the raw response body."""
        if not self._key or not self._token:
            raise TicketingError("Ticketing credentials are not configured")

        params = {"key": self._key, "token": self._token}
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.get(self.lists_url, params=params) as resp:
                    resp.raise_for_status()
                    return await resp.read()
        except asyncio.TimeoutError as exc:
            raise TicketingError(f"Timed out fetching {self.lists_url}") from exc
        except aiohttp.ClientError as exc:
            raise TicketingError(f"Failed to fetch board lists: {exc}") from exc

    async def fetch_board_lists(self) -> List[BoardList]:
        body = await self._get_lists_body()
        lists = decode_board_lists(body)
        logger.debug("Fetched %d list(s) from board %s", len(lists), self.board_id)
        return lists


__all__ = ["BoardList", "TicketingClient", "TicketingError", "decode_board_lists"]
