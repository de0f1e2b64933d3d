import asyncio
import json
from types import SimpleNamespace

import pytest

from rdss_bot.clients.trello import (
    BoardList,
    TicketingClient,
    TicketingError,
    decode_board_lists,
)


def test_decode_board_lists_builds_typed_records():
    body = json.dumps(
        [
            {"id": "5ed7", "name": "Reports", "closed": False, "idBoard": "b1", "pos": 16384, "subscribed": None},
            {"id": "5ed8", "name": "Archive", "closed": True},
        ]
    )

    lists = decode_board_lists(body)

    assert lists == [
        BoardList(id="5ed7", name="Reports", closed=False, pos=16384.0, id_board="b1"),
        BoardList(id="5ed8", name="Archive", closed=True),
    ]


def test_decode_empty_array():
    assert decode_board_lists("[]") == []


@pytest.mark.parametrize(
    "body",
    [
        "not json",
        json.dumps({"id": "x", "name": "y"}),
        json.dumps(["just a string"]),
        json.dumps([{"name": "missing id"}]),
    ],
)
def test_decode_rejects_bad_payloads(body):
    with pytest.raises(TicketingError):
        decode_board_lists(body)


def test_lists_url_and_config():
    cfg = SimpleNamespace(
        API_URL="https://api.trello.com/1/",
        BOARD_ID="board42",
        TRELLO_KEY="k",
        TRELLO_ACCESS_TOKEN="t",
        TIMEOUT_SECONDS=5,
    )

    client = TicketingClient.from_config(cfg)

    assert client.lists_url == "https://api.trello.com/1/boards/board42/lists"


def test_missing_credentials_raise_ticketing_error():
    client = TicketingClient(api_url="https://example.invalid", board_id="b", key=None, token="t")

    with pytest.raises(TicketingError):
        asyncio.run(client.fetch_board_lists())


def test_decode_accepts_utf8_bytes():
    body = json.dumps([{"id": "1", "name": "Café"}]).encode("utf-8")

    assert decode_board_lists(body) == [BoardList(id="1", name="Café")]


def test_decode_rejects_invalid_utf8_bytes():
    with pytest.raises(TicketingError, match="not UTF-8"):
        decode_board_lists(b"\xff\xfe\xfa[]")
