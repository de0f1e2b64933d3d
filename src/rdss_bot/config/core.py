import logging
import os

from .loader import as_bool, section

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "rdss:"


class Core:
    def __init__(self, config: dict | None = None) -> None:
        discord_cfg = section(config, "discord")
        commands_cfg = section(config, "commands")

        token_env = str(discord_cfg.get("token_env", "DISCORD_API_TOKEN"))
        self.DISCORD_API_TOKEN: str | None = os.getenv(token_env)

        self.COMMAND_PREFIX: str = str(
            commands_cfg.get("prefix") or os.getenv("RDSS_COMMAND_PREFIX") or DEFAULT_PREFIX
        )
        self.ENABLE_COVERAGE_TIMER: bool = as_bool(
            commands_cfg.get("enable_coverage_timer", os.getenv("ENABLE_COVERAGE_TIMER", "false"))
        )
        self.COVERAGE_CHECK_MINUTES: int = int(
            commands_cfg.get("coverage_check_minutes", os.getenv("COVERAGE_CHECK_MINUTES", "10"))
        )

        if not self.COMMAND_PREFIX.strip():
            raise ValueError("Command prefix must not be blank")
        if self.COVERAGE_CHECK_MINUTES < 1:
            raise ValueError("COVERAGE_CHECK_MINUTES must be at least 1")
