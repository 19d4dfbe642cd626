# coupgame

A small implementation of the card game *Coup*. Every player holds one of six
roles: Governor, Spy, Baron, General, Judge or Merchant. On each turn a player
collects coins, takes coins from others, or spends coins to sanction, bribe or
overthrow a rival. The last active player wins.

## Installing

```
pip install .
```

The graphical front end needs `pygame`. pip installs it with the package.

## Playing

```
coupgame
```

This opens the setup window (`coupgame.app.main`). Type a name for the game and
press **Create Game**. Then type each player's name and press **Add Player**.
Each player gets a random role. A game holds at most six players, and names
must be unique. When there are at least two players, press **Start Game**.

The game window (`coupgame.gui.GameGUI`) then shows whose turn it is and lists
the active players with their roles. Each press of **Perform Action** passes
the turn to the next active player.

## Using the library

The rules live in plain classes that need no window:

- `coupgame.roles`: the `Role` and `ActionKind` enums, `role_to_string`, and
  `GameError`, which is raised for every move the rules do not allow.
- `coupgame.player`: `Player` and the role classes `Baron`, `General`,
  `Governor`, `Judge`, `Merchant` and `Spy`, plus `random_role()`.
- `coupgame.actions`: the actions `Gather`, `Tax`, `Arrest`, `Bribe`,
  `Sanction` and `Coup`, each with an `execute(target=None)` method.
- `coupgame.game`: `Game`, which holds the players and the turn order.

```python
from coupgame.game import Game
from coupgame.player import Player
from coupgame.roles import Role, GameError

game = Game("evening")
alice = Player("alice", game, Role.GOVERNOR)
bob = Player("bob", game, Role.MERCHANT)
game.add_player(alice)
game.add_player(bob)

current = game.current_turn()            # alice
action = game.choose_action(current, 2)  # ActionKind.TAX
game.do_action(current, action)
print(alice.coins)                       # 3: a Governor takes three on tax
print(game.winner())                     # "No winner yet."
```

`Game.choose_action` checks whether a player may take an action and returns it
as an `ActionKind`. `Game.do_action` carries it out. For Arrest, Sanction and
Coup, the `target` argument is an index into `Game.players()`, the active
players in seating order. `Game.next_turn()` rotates the turn order and returns
the next active player. `Game.special_operations` uses a role's own ability:
a Baron invests, a Spy peeks at another player's coins, and a Merchant holding
three or more coins gains one.

Actions are numbered as follows:

| Number | Action   | Cost / effect                                                   |
|--------|----------|-----------------------------------------------------------------|
| 1      | Gather   | +1 coin; not allowed while sanctioned                           |
| 2      | Tax      | +2 coins (+3 for a Governor); Governors in play may block it    |
| 3      | Arrest   | take a coin from another player, not the same one twice in a row |
| 4      | Bribe    | pay 4 for two extra turns; Judges in play may block it          |
| 5      | Sanction | pay 3 to stop a player's economic actions                       |
| 6      | Coup     | pay 7 to remove a player; Generals in play may block it         |

A player holding ten or more coins must coup.

## What it does not do

The game window does not let players choose actions, targets or role
abilities. **Perform Action** only moves the turn on. To play by the rules,
call `Game.choose_action`, `Game.do_action` and `Game.special_operations`
from Python. Games are not saved anywhere.

## Running the tests

```
pip install .[test]
pytest
```