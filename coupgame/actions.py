"""The six actions a player can take on their turn."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from coupgame.player import Player
from coupgame.roles import GameError, Role

GATHER_INCOME = 1
TAX_INCOME = 2
GOVERNOR_TAX_INCOME = 3
BRIBE_COST = 4
SANCTION_COST = 3
JUDGE_SANCTION_SURCHARGE = 1
BARON_SANCTION_COMPENSATION = 1
COUP_COST = 7


class Action(ABC):
    """An action started by ``source`` within ``game``.

    The game is expected to offer ``players()``, ``players_by_role(role)``,
    ``current_turn()``, ``winner()``, a mutable ``turns`` list and a
    ``last_arrest`` name.
    """

    name: ClassVar[str] = "Action"

    def __init__(self, game: Any, source: Player) -> None:
        self.game = game
        self.source = source

    @abstractmethod
    def execute(self, target: Optional[Player] = None) -> Any:
        """Carry out the action, against ``target`` where the action needs one."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self.source.name!r})"


class _Untargeted(Action):
    """An action that acts only on its source."""

    def _reject_target(self, target: Optional[Player]) -> None:
        if target is not None:
            raise GameError(f"{self.name} is not performed on another player.")


class Gather(_Untargeted):
    """Take one coin from the pot; not allowed while under sanction."""

    name = "Gather"

    def execute(self, target: Optional[Player] = None) -> None:
        self._reject_target(target)
        if self.source.sanctioned:
            raise GameError("You are blocked! cannot use gather.")
        self.source.add_coins(GATHER_INCOME)


class Tax(_Untargeted):
    """Take two coins (three for a governor); governors in play may block it."""

    name = "Tax"

    def execute(self, target: Optional[Player] = None) -> None:
        self._reject_target(target)
        source = self.source
        if source.sanctioned:
            raise GameError("You are in sanction! cannot use tax.")
        if source.role is Role.GOVERNOR:
            source.add_coins(GOVERNOR_TAX_INCOME)
            return
        if any(governor.block_tax(source) for governor in self.game.players_by_role(Role.GOVERNOR)):
            raise GameError("You are blocked! cannot use tax.")
        source.add_coins(TAX_INCOME)


class Bribe(_Untargeted):
    """Pay four coins for two extra turns; judges in play may block it."""

    name = "Bribe"

    def execute(self, target: Optional[Player] = None) -> None:
        self._reject_target(target)
        current = self.game.current_turn()
        if current is None:
            raise GameError("Can't find player(bribe).")
        current.add_coins(-BRIBE_COST)
        if any(judge.block_bribe(self.source) for judge in self.game.players_by_role(Role.JUDGE)):
            raise GameError("You are blocked! cannot use bribe.")
        self.game.turns[0:0] = [current, current]


class Arrest(Action):
    """Take one coin from another player, never the same player twice in a row."""

    name = "Arrest"

    def execute(self, target: Optional[Player] = None) -> None:
        if target is None:
            raise GameError("Arrest is performed on another player.")
        if self.game.last_arrest == target.name:
            raise GameError("Can't find player(Arrest).")
        if target.role is not Role.GENERAL:
            target.add_coins(-1)
        if target.role is Role.MERCHANT:
            target.add_coins(-1)
        else:
            self.source.add_coins(1)
        self.game.last_arrest = target.name


class Sanction(Action):
    """Pay three coins to bar another player from economic actions."""

    name = "Sanction"

    def execute(self, target: Optional[Player] = None) -> None:
        if target is None:
            raise GameError("Sanction is performed on another player.")
        self.source.add_coins(-SANCTION_COST)
        target.sanctioned = True
        if target.role is Role.JUDGE:
            self.source.add_coins(-JUDGE_SANCTION_SURCHARGE)
        if target.role is Role.BARON:
            target.add_coins(BARON_SANCTION_COMPENSATION)


class Coup(Action):
    """Pay seven coins to remove another player; generals in play may block it."""

    name = "Coup"

    def execute(self, target: Optional[Player] = None) -> str:
        if target is None:
            raise GameError("Coup action requires a target player.")
        self.source.add_coins(-COUP_COST)
        if any(general.block_coup(self.source) for general in self.game.players_by_role(Role.GENERAL)):
            raise GameError("You are blocked! canceled coup.")
        target.active = False
        print(f"Player {target.name} exited the game by {self.source.name}")
        print("Players remaining in the game: ")
        for player in self.game.players():
            print(player.name)
        return self.game.winner()