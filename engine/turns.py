"""Turn ownership and per-turn move budgets."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Set

from engine.config import RulesConfig
from engine.pieces import Piece, Side

LOGGER = logging.getLogger(__name__)


class Phase(str, Enum):
    OPENING = "opening"
    NORMAL = "normal"


class TurnState:
    """Tracks the active side, its remaining budget and which pieces moved.

    The first side to run out of its opening budget moves the match into the
    normal phase for good.
    """

    def __init__(self, config: RulesConfig | None = None) -> None:
        self.config = config or RulesConfig()
        self.active_side: Side = self.config.first_side
        self.phase = Phase.OPENING
        self.moves_taken = 0
        self.moved_pieces: Set[int] = set()

    @property
    def budget(self) -> int:
        if self.phase is Phase.OPENING:
            return self.config.opening_budget
        return self.config.normal_budget

    @property
    def remaining_moves(self) -> int:
        return self.budget - self.moves_taken

    def has_moved(self, piece: Piece) -> bool:
        return piece.piece_id in self.moved_pieces

    def mark_moved(self, piece: Piece) -> None:
        # Only the active side's pieces are tracked; forced off-turn moves are not.
        if piece.side is self.active_side:
            self.moved_pieces.add(piece.piece_id)

    def record_move(self, piece: Piece) -> bool:
        """Spend one move of the budget. Returns True when the turn passed."""
        self.mark_moved(piece)
        self.moves_taken += 1
        if self.moves_taken < self.budget:
            return False
        self._advance()
        return True

    def _advance(self) -> None:
        previous = self.active_side
        self.active_side = previous.opponent()
        self.moves_taken = 0
        self.moved_pieces.clear()
        if self.phase is Phase.OPENING:
            self.phase = Phase.NORMAL
        LOGGER.info(
            "Turn passes from %s to %s (%s phase, %d moves)",
            previous.value,
            self.active_side.value,
            self.phase.value,
            self.budget,
        )
