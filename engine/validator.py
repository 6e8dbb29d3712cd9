"""Move legality: adjacent steps and terrain jumps."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Set

from engine.board import Board
from engine.config import RulesConfig
from engine.errors import (
    BlockedDestination,
    BlockedPath,
    IllegalShape,
    MoveError,
    TerrainForbidden,
)
from engine.location import ORTHOGONAL_STEPS, Location, in_bounds
from engine.path import JumpPath, analyze_path
from engine.pieces import Piece
from engine.rules import JUMP_TERRAINS, Terrain, can_enter, can_jump

LOGGER = logging.getLogger(__name__)


class MoveKind(str, Enum):
    ADJACENT = "adjacent"
    JUMP = "jump"


@dataclass(frozen=True)
class MovePlan:
    """A validated move, ready to be executed as-is."""

    piece: Piece
    origin: Location
    target: Location
    kind: MoveKind
    path: Optional[JumpPath] = None
    defender: Optional[Piece] = None


class MoveValidator:
    """Single authority on move legality. Never mutates the board."""

    def __init__(self, board: Board, config: Optional[RulesConfig] = None) -> None:
        self.board = board
        self.config = config or RulesConfig()

    def plan(self, piece: Piece, target: Location) -> MovePlan:
        """Validate a move and return its plan, or raise the failing rule."""
        origin = piece.location
        if origin == target:
            raise IllegalShape(f"{piece} cannot move onto its own cell")
        if origin.is_near(target):
            return self._plan_adjacent(piece, target)
        if origin.is_aligned(target):
            return self._plan_jump(piece, target)
        raise IllegalShape(f"{target} is neither adjacent to nor in line with {origin}")

    def is_legal(self, piece: Piece, target: Location) -> bool:
        try:
            self.plan(piece, target)
        except MoveError:
            return False
        return True

    def destinations(self, piece: Piece) -> Set[Location]:
        """All targets ``piece`` could legally move to, ignoring turn rules."""
        found: Set[Location] = set()
        origin = piece.location
        for dx, dy in ORTHOGONAL_STEPS:
            x, y = origin.x + dx, origin.y + dy
            while in_bounds(x, y):
                target = Location(x, y)
                if self.is_legal(piece, target):
                    found.add(target)
                x, y = x + dx, y + dy
        return found

    def _plan_adjacent(self, piece: Piece, target: Location) -> MovePlan:
        defender = self._check_destination(piece, target)
        return MovePlan(
            piece=piece,
            origin=piece.location,
            target=target,
            kind=MoveKind.ADJACENT,
            defender=defender,
        )

    def _plan_jump(self, piece: Piece, target: Location) -> MovePlan:
        path = analyze_path(self.board, piece, target)
        if not can_jump(path.terrain, piece.animal):
            raise TerrainForbidden(f"{piece.animal.name.lower()} cannot jump {path.terrain.name.lower()}")

        if path.terrain is Terrain.WATER:
            origin_cell = self.board.cell_at(piece.location)
            if origin_cell is not None and origin_cell.terrain is Terrain.WATER:
                raise TerrainForbidden(f"{piece} cannot jump water while standing in water")
            if path.enemy_count > 1 or path.occupant_count > 1:
                raise BlockedPath(f"Water corridor holds {path.occupant_count} pieces")
        elif path.enemy_count > 1:
            raise BlockedPath(f"Grass corridor holds {path.enemy_count} enemies")

        target_cell = self.board.cell_at(target)
        if target_cell is not None:
            if target_cell.terrain in JUMP_TERRAINS:
                raise TerrainForbidden(f"Jump cannot land on {target_cell.terrain.name.lower()}")
            if target_cell.terrain is Terrain.TRAP and not self.config.allow_jump_onto_trap:
                raise TerrainForbidden("Jump cannot land on a trap")

        defender = self._check_destination(piece, target)
        return MovePlan(
            piece=piece,
            origin=piece.location,
            target=target,
            kind=MoveKind.JUMP,
            path=path,
            defender=defender,
        )

    def _check_destination(self, piece: Piece, target: Location) -> Optional[Piece]:
        """Common landing rules; returns the enemy to fight, if any."""
        cell = self.board.cell_at(target)
        if cell is None:
            raise TerrainForbidden(f"{target} is not part of the board")
        if not can_enter(cell.terrain, piece.animal):
            raise TerrainForbidden(f"{piece.animal.name.lower()} cannot enter {cell.terrain.name.lower()}")
        occupant = self.board.piece_at(target)
        if occupant is not None and occupant.side is piece.side:
            raise BlockedDestination(f"{occupant} already stands on {target}")
        return occupant
