"""Strength comparison and trap effects."""

from __future__ import annotations

from enum import Enum

from engine.board import Board
from engine.pieces import Piece


class CombatResult(str, Enum):
    ATTACKER_WINS = "attacker_wins"
    DEFENDER_WINS = "defender_wins"
    MUTUAL_DESTRUCTION = "mutual_destruction"


def is_trapped(board: Board, piece: Piece) -> bool:
    """Return whether the piece sits on an enemy or neutral trap."""
    return board.traps(piece.location, piece.side)


def effective_strength(board: Board, piece: Piece) -> int:
    """Rank, or zero while trapped."""
    return 0 if is_trapped(board, piece) else piece.rank


def resolve_combat(attacker_strength: int, defender_strength: int) -> CombatResult:
    if attacker_strength > defender_strength:
        return CombatResult.ATTACKER_WINS
    if attacker_strength < defender_strength:
        return CombatResult.DEFENDER_WINS
    return CombatResult.MUTUAL_DESTRUCTION


def fight(board: Board, attacker: Piece, defender: Piece) -> CombatResult:
    """Resolve a fight with both pieces still on their own cells."""
    return resolve_combat(effective_strength(board, attacker), effective_strength(board, defender))
