import os
from typing import List, Tuple

from .loader import section

# (config key, env var, default role names), highest tier first
_TIER_KEYS: Tuple[Tuple[str, str, str], ...] = (
    ("management", "ROLE_MANAGEMENT", "Server Manager"),
    ("internal_affairs", "ROLE_INTERNAL_AFFAIRS", "Internal Affairs"),
    ("senior_supervisor", "ROLE_SENIOR_SUPERVISOR", "Senior Community Supervisor"),
    ("supervisor", "ROLE_SUPERVISOR", "Community Supervisor"),
    ("trial_supervisor", "ROLE_TRIAL_SUPERVISOR", "Trial Supervisor"),
)


def _split_names(raw: str) -> List[str]:
    return [name.strip() for name in raw.split(",") if name.strip()]


class Roles:
    """Privilege role names (or ids) for each tier."""

    def __init__(self, config: dict | None = None) -> None:
        cfg = section(config, "roles")

        self.BY_TIER: dict[str, List[str]] = {}
        for key, env, default in _TIER_KEYS:
            configured = cfg.get(key)
            if isinstance(configured, list):
                names = [str(n).strip() for n in configured if str(n).strip()]
            else:
                names = _split_names(str(configured or os.getenv(env, default)))
            self.BY_TIER[key] = names
