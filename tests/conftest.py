import pytest

from engine.config import RulesConfig
from engine.layout import build_match
from engine.match import CommandGate


@pytest.fixture
def make_match():
    """Build a MatchContext from terrain rows and (animal, side, x, y) tuples."""

    def _make(terrain, pieces=(), owners=None, **rules):
        payload = {
            "terrain": list(terrain),
            "pieces": [{"animal": a, "side": s, "x": x, "y": y} for a, s, x, y in pieces],
        }
        if owners is not None:
            payload["owners"] = list(owners)
        return build_match(payload, RulesConfig(**rules))

    return _make


@pytest.fixture
def make_gate(make_match):
    def _make(terrain, pieces=(), owners=None, **rules):
        return CommandGate(make_match(terrain, pieces, owners, **rules))

    return _make