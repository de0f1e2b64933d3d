"""
Internal-affairs history lookup.

Fetches the configured Trello board's lists and logs each one. Nothing is sent
back to the channel, on success or on failure.
"""

from __future__ import annotations

import logging
from typing import List

from ...clients.trello import BoardList, TicketingError
from ..context import CommandContext

logger = logging.getLogger(__name__)


async def handle(ctx: CommandContext) -> List[BoardList]:
    """Log the board's lists; ticketing failures stop here."""

    client = ctx.services.ticketing
    try:
        board_lists = await client.fetch_board_lists()
    except TicketingError as exc:
        logger.error(
            "History lookup for %s failed: %s", ctx.message.author.name, exc
        )
        return []

    for board_list in board_lists:
        logger.info("Board list: %s", board_list)
    return board_lists
