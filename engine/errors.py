"""Rejection reasons raised by the engine.

Every rejection is raised before any state is mutated, so a caller that catches
``MoveError`` can rely on the match being exactly as it was.
"""

from __future__ import annotations


class MoveError(Exception):
    """Base class for a rejected command."""

    code = "move_error"


class InvalidCoordinate(MoveError, ValueError):
    """Coordinate outside the 19x13 grid."""

    code = "invalid_coordinate"


class UnknownPiece(MoveError):
    """Piece reference does not name a live piece."""

    code = "unknown_piece"


class OutOfTurn(MoveError):
    """Piece does not belong to the active side."""

    code = "out_of_turn"


class AlreadyMoved(MoveError):
    """Piece already moved during the current turn."""

    code = "already_moved"


class IllegalShape(MoveError):
    """Target is neither adjacent nor reachable through a jump corridor."""

    code = "illegal_shape"


class NotStraightLine(IllegalShape):
    code = "not_straight_line"


class Impassable(IllegalShape):
    """Corridor has absent cells or is not a single water/grass run."""

    code = "impassable"


class BlockedPath(MoveError):
    """Corridor occupancy breaks the jump limits."""

    code = "blocked_path"


class OwnPieceBlocks(BlockedPath):
    code = "own_piece_blocks"


class BlockedDestination(MoveError):
    """Destination holds a piece of the mover's own side."""

    code = "blocked_destination"


class TerrainForbidden(MoveError):
    """Animal may not enter or jump the terrain involved."""

    code = "terrain_forbidden"


class LayoutError(ValueError):
    """Initial layout violates a board invariant."""
