import pytest

from coupgame.actions import (
    BRIBE_COST,
    COUP_COST,
    GATHER_INCOME,
    GOVERNOR_TAX_INCOME,
    SANCTION_COST,
    TAX_INCOME,
    Arrest,
    Bribe,
    Coup,
    Gather,
    Sanction,
    Tax,
)
from coupgame.player import Baron, General, Governor, Judge, Merchant, Player, Spy
from coupgame.roles import GameError, Role


class FakeGame:
    def __init__(self):
        self.members = []
        self.turns = []
        self.last_arrest = "none"

    def add(self, player):
        self.members.append(player)
        self.turns.append(player)
        return player

    def players(self):
        return [p for p in self.members if p.active]

    def players_by_role(self, role):
        return [p for p in self.players() if p.role is role]

    def current_turn(self):
        return self.turns[0]

    def winner(self):
        active = self.players()
        return active[0].name if len(active) == 1 else "No winner yet."


@pytest.fixture
def game():
    return FakeGame()


def plain(name, game, role=Role.SPY, coins=0):
    p = game.add(Player(name, game, role))
    p.coins = coins
    return p


def test_gather_adds_income(game):
    p = plain("a", game)
    before = p.coins
    Gather(game, p).execute()
    assert p.coins == before + GATHER_INCOME


def test_gather_blocked_by_sanction(game):
    p = plain("a", game)
    p.sanctioned = True
    with pytest.raises(GameError):
        Gather(game, p).execute()
    assert p.coins == 0


def test_gather_rejects_target(game):
    p = plain("a", game)
    q = plain("b", game)
    with pytest.raises(GameError):
        Gather(game, p).execute(q)


def test_tax_without_governor(game):
    p = plain("a", game)
    Tax(game, p).execute()
    assert p.coins == TAX_INCOME


def test_tax_for_governor(game):
    g = game.add(Governor("gov", game))
    Tax(game, g).execute()
    assert g.coins == GOVERNOR_TAX_INCOME


def test_tax_blocked_by_governor(game):
    game.add(Governor("gov", game))
    p = plain("a", game)
    with pytest.raises(GameError):
        Tax(game, p).execute()
    assert p.coins == 0
    assert p.sanctioned is True


def test_tax_ignores_inactive_governor(game):
    gov = game.add(Governor("gov", game))
    gov.active = False
    p = plain("a", game)
    Tax(game, p).execute()
    assert p.coins == TAX_INCOME


def test_tax_under_sanction(game):
    p = plain("a", game)
    p.sanctioned = True
    with pytest.raises(GameError):
        Tax(game, p).execute()


def test_arrest_moves_one_coin(game):
    a = plain("a", game, coins=2)
    b = plain("b", game, coins=2)
    Arrest(game, a).execute(b)
    assert a.coins + b.coins == 4
    assert a.coins > b.coins
    assert game.last_arrest == "b"


def test_arrest_same_target_twice(game):
    a = plain("a", game, coins=2)
    b = plain("b", game, coins=2)
    Arrest(game, a).execute(b)
    with pytest.raises(GameError):
        Arrest(game, a).execute(b)


def test_arrest_general_keeps_coins(game):
    a = plain("a", game)
    g = game.add(General("g", game))
    g.coins = 2
    Arrest(game, a).execute(g)
    assert g.coins == 2
    assert a.coins == 1


def test_arrest_merchant_pays_pot(game):
    a = plain("a", game)
    m = game.add(Merchant("m", game))
    m.coins = 5
    Arrest(game, a).execute(m)
    assert a.coins == 0
    assert m.coins == 3


def test_arrest_requires_target(game):
    a = plain("a", game)
    with pytest.raises(GameError):
        Arrest(game, a).execute()


def test_bribe_grants_two_extra_turns(game):
    a = plain("a", game, coins=BRIBE_COST)
    b = plain("b", game)
    Bribe(game, a).execute()
    assert a.coins == 0
    assert game.turns == [a, a, a, b]


def test_bribe_blocked_by_judge_still_costs(game):
    a = plain("a", game, coins=BRIBE_COST)
    game.add(Judge("j", game))
    turns_before = list(game.turns)
    with pytest.raises(GameError):
        Bribe(game, a).execute()
    assert a.coins == 0
    assert game.turns == turns_before


def test_bribe_rejects_target(game):
    a = plain("a", game, coins=BRIBE_COST)
    b = plain("b", game)
    with pytest.raises(GameError):
        Bribe(game, a).execute(b)


def test_sanction_marks_target(game):
    a = plain("a", game, coins=SANCTION_COST)
    b = plain("b", game)
    Sanction(game, a).execute(b)
    assert b.sanctioned is True
    assert a.coins == 0


def test_sanction_on_judge_costs_more(game):
    a = plain("a", game, coins=SANCTION_COST)
    j = game.add(Judge("j", game))
    Sanction(game, a).execute(j)
    assert a.coins < 0
    assert j.sanctioned is True


def test_sanction_compensates_baron(game):
    a = plain("a", game, coins=SANCTION_COST)
    b = game.add(Baron("b", game))
    Sanction(game, a).execute(b)
    assert b.coins == 1
    assert a.coins == 0


def test_sanction_requires_target(game):
    a = plain("a", game, coins=SANCTION_COST)
    with pytest.raises(GameError):
        Sanction(game, a).execute()


def test_coup_removes_target_and_finds_winner(game, capsys):
    a = plain("a", game, coins=COUP_COST)
    b = plain("b", game)
    result = Coup(game, a).execute(b)
    assert b.active is False
    assert a.coins == 0
    assert result == "a"
    assert "Player b exited the game by a" in capsys.readouterr().out


def test_coup_no_winner_with_three_players(game):
    a = plain("a", game, coins=COUP_COST)
    b = plain("b", game)
    plain("c", game)
    assert Coup(game, a).execute(b) == "No winner yet."


def test_coup_blocked_by_general(game):
    a = plain("a", game, coins=COUP_COST)
    g = game.add(General("g", game))
    g.coins = 5
    b = plain("b", game)
    with pytest.raises(GameError):
        Coup(game, a).execute(b)
    assert b.active is True
    assert g.coins == 0
    assert a.coins == 0


def test_coup_general_without_coins_raises(game):
    a = plain("a", game, coins=COUP_COST)
    game.add(General("g", game))
    b = plain("b", game)
    with pytest.raises(GameError):
        Coup(game, a).execute(b)
    assert b.active is True


def test_coup_requires_target(game):
    a = plain("a", game, coins=COUP_COST)
    with pytest.raises(GameError):
        Coup(game, a).execute()


def test_spy_gather_is_plain(game):
    s = game.add(Spy("s", game))
    Gather(game, s).execute()
    Gather(game, s).execute()
    assert s.coins == 2 * GATHER_INCOME