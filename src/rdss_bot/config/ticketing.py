import logging
import os

from .loader import section

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.trello.com/1"
DEFAULT_BOARD_ID = "5ed7949d405d7d6fd00c201c"


class Ticketing:
    """Trello credentials and board selection for the history command."""

    def __init__(self, config: dict | None = None) -> None:
        cfg = section(config, "ticketing")

        key_env = str(cfg.get("key_env", "TRELLO_KEY"))
        token_env = str(cfg.get("token_env", "TRELLO_ACCESS_TOKEN"))

        self.TRELLO_KEY: str | None = os.getenv(key_env)
        self.TRELLO_ACCESS_TOKEN: str | None = os.getenv(token_env)
        self.API_URL: str = str(cfg.get("api_url", os.getenv("TRELLO_API_URL", DEFAULT_API_URL))).rstrip("/")
        self.BOARD_ID: str = str(cfg.get("board_id", os.getenv("TRELLO_BOARD_ID", DEFAULT_BOARD_ID)))
        # 0 disables the timeout
        self.TIMEOUT_SECONDS: float = float(
            cfg.get("timeout_seconds", os.getenv("TRELLO_TIMEOUT_SECONDS", "30"))
        )

        missing = [
            name
            for name, val in (
                (key_env, self.TRELLO_KEY),
                (token_env, self.TRELLO_ACCESS_TOKEN),
            )
            if not val
        ]
        if missing:
            logger.warning(
                "Missing ticketing credentials (%s); history lookups will fail.",
                ", ".join(missing),
            )
