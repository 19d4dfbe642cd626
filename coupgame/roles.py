"""Roles, action kinds and the error type shared by the game."""

from __future__ import annotations

from enum import Enum, IntEnum


class Role(Enum):
    """The role a player holds for the whole game."""

    GOVERNOR = "Governor"
    SPY = "Spy"
    BARON = "Baron"
    GENERAL = "General"
    JUDGE = "Judge"
    MERCHANT = "Merchant"

    def __str__(self) -> str:
        return self.value


class ActionKind(IntEnum):
    """The actions a player may take on their turn, numbered as offered."""

    GATHER = 1
    TAX = 2
    ARREST = 3
    BRIBE = 4
    SANCTION = 5
    COUP = 6


class GameError(RuntimeError):
    """Raised when a move is not allowed by the rules of the game."""


def role_to_string(role: Role) -> str:
    """Return the display name of a role."""
    if not isinstance(role, Role):
        raise GameError(f"Unknown role: {role!r}")
    return role.value