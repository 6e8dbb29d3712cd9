from cli.main import describe_event, parse_args, run_command, status_line
from engine.events import TurnAdvanced
from engine.pieces import Side
from engine.turns import Phase


def test_move_command(make_gate):
    gate = make_gate(["..", ".."], [("pig", "blue", 0, 0)])
    assert run_command(gate, "move 0 0 0 1") == "bPg moved to (0,1)."
    assert gate.piece_at((0, 1)) is not None


def test_rejected_move_reports_the_rule(make_gate):
    gate = make_gate([".W"], [("pig", "blue", 0, 0)])
    assert run_command(gate, "move 0 0 1 0").startswith("Rejected (terrain_forbidden)")


def test_hints_and_bad_input(make_gate):
    gate = make_gate([".."], [("pig", "blue", 0, 0)])
    assert run_command(gate, "hints 0 0") == "Legal targets: (1,0)"
    assert run_command(gate, "hints 1 0") == "No piece at (1,0)."
    assert run_command(gate, "move a b c d") == "Invalid numeric input."
    assert run_command(gate, "jump") == "Invalid command format."
    assert run_command(gate, "move 0 0 30 0").startswith("Rejected (invalid_coordinate)")


def test_describe_turn_event():
    event = TurnAdvanced(side=Side.RED, budget=3, phase=Phase.NORMAL)
    assert describe_event(event) == "Turn passes to red (3 moves)"


def test_parse_args():
    args = parse_args(["--layout", "board.json", "--log-level", "debug"])
    assert args.layout == "board.json"
    assert args.config is None


def test_status_line_counts_pieces(make_gate):
    gate = make_gate(["..", ".."], [("pig", "blue", 0, 0), ("cat", "red", 1, 1), ("rat", "red", 0, 1)])
    assert status_line(gate) == "Turn: blue | Phase: opening | Moves left: 2 | Pieces: blue=1 red=2"
