"""Players and the role-specific abilities they carry."""

from __future__ import annotations

import itertools
import random
from typing import Any, ClassVar, Optional

from coupgame.roles import GameError, Role, role_to_string

_ids = itertools.count()


def random_role() -> Role:
    """Pick one of the six roles uniformly at random."""
    return random.choice(list(Role))


class Player:
    """A participant in a game, holding coins, a role and a sanction flag."""

    default_role: ClassVar[Optional[Role]] = None

    def __init__(self, name: str, game: Any = None, role: Optional[Role] = None) -> None:
        self.name = name
        self.game = game
        self.id = next(_ids)
        self.coins = 0
        self.sanctioned = False
        self.active = True
        if role is None:
            role = self.default_role if self.default_role is not None else random_role()
        self._role = role

    @property
    def role(self) -> Role:
        """The player's role; fixed once the player is created."""
        return self._role

    def add_coins(self, amount: int) -> None:
        """Change the coin count by ``amount``, which may be negative."""
        self.coins += amount

    def role_name(self) -> str:
        """Return the display name of this player's role."""
        return role_to_string(self._role)

    def block_tax(self, player: "Player") -> bool:
        """Only a governor can block tax."""
        return False

    def block_coup(self, player: "Player") -> bool:
        """Only a general can block a coup."""
        return False

    def block_bribe(self, player: "Player") -> bool:
        """Only a judge can block a bribe."""
        return False

    def invest(self) -> None:
        """Only a baron can invest; for anyone else this does nothing."""

    def peek(self, player: "Player") -> Optional[int]:
        """Only a spy can see another player's coins; others get None."""
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, role={self._role.value}, coins={self.coins})"


class Baron(Player):
    """Can invest three coins and get six back."""

    default_role = Role.BARON

    def invest(self) -> None:
        if self.coins < 3:
            raise GameError("Not enough coins, can't invest.")
        self.add_coins(3)
        print("Baron invested.")


class General(Player):
    """Can pay five coins to stop a coup."""

    default_role = Role.GENERAL

    def block_coup(self, player: Player) -> bool:
        if self.coins < 5:
            raise GameError("Not enough coins, can't do coup.")
        self.add_coins(-5)
        print("General blocks coup")
        return True


class Governor(Player):
    """Takes three coins on tax and blocks other players' tax."""

    default_role = Role.GOVERNOR

    def block_tax(self, player: Player) -> bool:
        print("Governor blocks tax")
        player.sanctioned = True
        return True


class Judge(Player):
    """Blocks bribes."""

    default_role = Role.JUDGE

    def block_bribe(self, player: Player) -> bool:
        print("Judge blocks bribe")
        return True


class Merchant(Player):
    """Earns a bonus coin when holding three or more; loses two when arrested."""

    default_role = Role.MERCHANT


class Spy(Player):
    """Can see another player's coins without spending a turn."""

    default_role = Role.SPY

    def peek(self, player: Player) -> int:
        return player.coins