import pytest

from engine.config import RulesConfig
from engine.location import Location
from engine.pieces import Animal, Piece, Side
from engine.turns import Phase, TurnState


def _pieces(side, count, start_id=1):
    return [Piece(piece_id=start_id + i, animal=Animal.PIG, side=side, location=Location(i, 0)) for i in range(count)]


def test_opening_then_normal_cycles():
    turns = TurnState()
    blue = _pieces(Side.BLUE, 3)
    red = _pieces(Side.RED, 3, start_id=10)

    assert turns.active_side is Side.BLUE
    assert turns.phase is Phase.OPENING
    assert turns.budget == 2

    assert turns.record_move(blue[0]) is False
    assert turns.remaining_moves == 1
    assert turns.record_move(blue[1]) is True
    assert turns.active_side is Side.RED
    assert turns.phase is Phase.NORMAL
    assert turns.moves_taken == 0
    assert turns.moved_pieces == set()

    assert turns.record_move(red[0]) is False
    assert turns.record_move(red[1]) is False
    assert turns.remaining_moves == 1
    assert turns.record_move(red[2]) is True
    assert turns.active_side is Side.BLUE
    assert turns.phase is Phase.NORMAL
    assert turns.budget == 3
    assert turns.moved_pieces == set()


def test_moved_pieces_are_tracked_within_a_turn():
    turns = TurnState()
    blue = _pieces(Side.BLUE, 2)
    turns.record_move(blue[0])
    assert turns.has_moved(blue[0])
    assert not turns.has_moved(blue[1])


def test_off_turn_pieces_are_not_tracked():
    turns = TurnState()
    red = _pieces(Side.RED, 1, start_id=50)
    turns.mark_moved(red[0])
    assert turns.moved_pieces == set()


def test_custom_budgets_and_first_side():
    turns = TurnState(RulesConfig(opening_budget=1, normal_budget=2, first_side=Side.RED))
    red = _pieces(Side.RED, 1)
    assert turns.active_side is Side.RED
    assert turns.record_move(red[0]) is True
    assert turns.active_side is Side.BLUE
    assert turns.budget == 2


def test_zero_budget_is_rejected():
    with pytest.raises(ValueError):
        RulesConfig(opening_budget=0)
