"""
Privilege tiers and role-to-tier resolution.

A member's tier is the highest rank among the privilege roles they hold. Roles
are matched by name, or by id when the config entry is written as
``id:<role id>``. The two never collide: a role named ``1234`` does not match
``id:1234``. Members without any privilege role resolve to ``PrivilegeTier.NONE``.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Sequence, Tuple

logger = logging.getLogger(__name__)

ID_PREFIX = "id:"


class PrivilegeTier(IntEnum):
    """Ordered privilege ranks; higher values outrank lower ones."""

    NONE = -1
    TRIAL_SUPERVISOR = 0
    SUPERVISOR = 1
    SENIOR_SUPERVISOR = 2
    INTERNAL_AFFAIRS = 3
    MANAGEMENT = 4


def _role_keys(role: Any) -> Tuple[str, ...]:
    """Return the lookup keys for a role object (or a bare role name)."""
    if isinstance(role, str):
        return (role,)

    keys = []
    name = getattr(role, "name", None)
    if name:
        keys.append(str(name))
    role_id = getattr(role, "id", None)
    if role_id is not None:
        keys.append(f"{ID_PREFIX}{role_id}")
    return tuple(keys)


class RoleResolver:
    """Resolve a set of held roles to a single :class:`PrivilegeTier`."""

    def __init__(self, table: Sequence[Tuple[str, PrivilegeTier]]) -> None:
        mapping: dict[str, PrivilegeTier] = {}
        for role_key, tier in table:
            if tier is PrivilegeTier.NONE:
                raise ValueError(f"Role {role_key!r} cannot be bound to tier NONE")
            existing = mapping.get(role_key)
            if existing is not None and existing is not tier:
                raise ValueError(
                    f"Role {role_key!r} bound to both {existing.name} and {tier.name}"
                )
            mapping[role_key] = tier
        self._tiers: Mapping[str, PrivilegeTier] = MappingProxyType(mapping)

    @classmethod
    def from_config(cls, by_tier: Mapping[str, Sequence[str]]) -> "RoleResolver":
        """
        Build a resolver from a ``{"management": [...], ...}`` mapping as
        produced by :class:`rdss_bot.config.roles.Roles`.
        """
        table = []
        for key, names in by_tier.items():
            tier = PrivilegeTier[key.upper()]
            table.extend((name, tier) for name in names)
        return cls(table)

    @property
    def table(self) -> Mapping[str, PrivilegeTier]:
        return self._tiers

    def resolve(self, held_roles: Iterable[Any]) -> PrivilegeTier:
        best = PrivilegeTier.NONE
        for role in held_roles:
            for key in _role_keys(role):
                tier = self._tiers.get(key)
                if tier is not None and tier > best:
                    best = tier
        return best


__all__ = ["PrivilegeTier", "RoleResolver"]
