"""The game table: its players, the turn order and the moves on offer."""

from __future__ import annotations

import itertools
from typing import List, Optional, Union

from coupgame.actions import (
    BRIBE_COST,
    COUP_COST,
    SANCTION_COST,
    Arrest,
    Bribe,
    Coup,
    Gather,
    Sanction,
    Tax,
)
from coupgame.player import Player
from coupgame.roles import ActionKind, GameError, Role

MAX_PLAYERS = 6
FORCED_COUP_COINS = 10
INVEST_COST = 3
MERCHANT_BONUS_THRESHOLD = 3
MERCHANT_BONUS = 1
NO_WINNER = "No winner yet."

_ids = itertools.count()


class Game:
    """A single game with up to six players and a rotating turn order."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.id = next(_ids)
        self.last_arrest = "none"
        self.players_list: List[Player] = []
        self.turns: List[Player] = []

    def add_player(self, player: Player) -> None:
        """Seat a new player; names must be unique and the table holds six."""
        if len(self.players_list) >= MAX_PLAYERS:
            raise GameError("The game is full, you cannot add more players.")
        if any(seated.name == player.name for seated in self.players_list):
            raise GameError(
                "This name is taken, there is a player in the current game with that name. "
                "Please choose a different name."
            )
        self.players_list.append(player)
        self.turns.append(player)

    def create_turns(self) -> List[Player]:
        """Return the turn order restricted to active players."""
        return [player for player in self.turns if player.active]

    def players_by_role(self, role: Role) -> List[Player]:
        """Return the active players holding ``role``."""
        return [player for player in self.players() if player.role is role]

    def players(self) -> List[Player]:
        """Return the active players in seating order."""
        return [player for player in self.players_list if player.active]

    def current_turn(self) -> Optional[Player]:
        """Return the player at the head of the turn order, or None if empty."""
        return self.turns[0] if self.turns else None

    def next_turn(self) -> Player:
        """Rotate the turn order and return the first active player moved."""
        for _ in range(len(self.turns)):
            current = self.turns.pop(0)
            self.turns.append(current)
            if current.active:
                return current
        raise GameError("No active players remain.")

    def choose_action(self, current: Player, action: Union[int, ActionKind]) -> ActionKind:
        """Check that ``current`` may take ``action`` and return it.

        A player holding ten coins or more is forced to coup.
        """
        print("Choose Action: (number)")
        if current.coins >= FORCED_COUP_COINS:
            print("You have more than 10 coins, you must do coup.")
            return ActionKind.COUP

        allowed = {ActionKind.ARREST}
        if current.sanctioned:
            print("You are blocked! cannot use gather.")
        else:
            print("1: Gather")
            print("2: Tax")
            allowed |= {ActionKind.GATHER, ActionKind.TAX}
        print("3: Arrest")
        if current.coins >= BRIBE_COST:
            print("4: Bribe")
            allowed.add(ActionKind.BRIBE)
        if current.coins >= SANCTION_COST:
            print("5: Sanction")
            allowed.add(ActionKind.SANCTION)
        if current.coins >= COUP_COST:
            print("6: Coup")
            allowed.add(ActionKind.COUP)

        if action in allowed:
            return ActionKind(action)
        raise GameError("Can't use this action.")

    def _target(self, index: Optional[int]) -> Player:
        if index is None or not 1 <= index <= len(self.players_list):
            raise GameError("Invalid target! please try again.")
        active = self.players()
        if index >= len(active):
            raise GameError("Invalid target! please try again.")
        return active[index]

    def do_action(
        self,
        current: Player,
        action: Union[int, ActionKind],
        target: Optional[int] = None,
    ) -> None:
        """Carry out ``action`` for ``current``; ``target`` indexes the active players."""
        if action == ActionKind.GATHER:
            if current.sanctioned:
                raise GameError("You are blocked! cannot use gather.")
            Gather(self, current).execute()
        elif action == ActionKind.TAX:
            if current.sanctioned:
                raise GameError("You are blocked! cannot use tax.")
            Tax(self, current).execute()
        elif action == ActionKind.ARREST:
            print("Choose player to attack: ")
            Arrest(self, current).execute(self._target(target))
        elif action == ActionKind.BRIBE:
            if current.coins < BRIBE_COST:
                raise GameError("Can't use bribe, you don't have enough money.")
            Bribe(self, current).execute()
        elif action == ActionKind.SANCTION:
            if current.coins < SANCTION_COST:
                raise GameError("Can't use sanction, you don't have enough money.")
            victim = None if target is None else self._target(target)
            Sanction(self, current).execute(victim)
        elif action == ActionKind.COUP:
            if current.coins < COUP_COST:
                raise GameError("Can't use coup, you don't have enough money.")
            victim = None if target is None else self._target(target)
            Coup(self, current).execute(victim)

    def special_operations(
        self,
        current: Player,
        want_to_invest: bool,
        target: Optional[int] = None,
    ) -> Optional[int]:
        """Use the ability of ``current``'s role; a spy's peek returns the coins seen."""
        role = current.role
        if role is Role.BARON:
            if want_to_invest:
                if current.coins < INVEST_COST:
                    raise GameError("You don't have enough money, can't invest.")
                current.invest()
        elif role is Role.SPY:
            if want_to_invest:
                if target is None or not 1 <= target < len(self.players_list):
                    raise GameError("Invalid target! please try again.")
                return current.peek(self.players_list[target])
        elif role is Role.MERCHANT:
            if current.coins >= MERCHANT_BONUS_THRESHOLD:
                current.add_coins(MERCHANT_BONUS)
        return None

    def winner(self) -> str:
        """Return the last active player's name, or a notice that play goes on."""
        active = self.players()
        if len(active) == 1:
            return active[0].name
        return NO_WINNER

    def __repr__(self) -> str:
        return f"Game(name={self.name!r}, players={len(self.players_list)})"