"""Corridor classification for jump moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from engine.board import Board
from engine.errors import IllegalShape, Impassable, OwnPieceBlocks
from engine.location import Location
from engine.pieces import Piece
from engine.rules import JUMP_TERRAINS, Terrain, positions_between


@dataclass(frozen=True)
class JumpPath:
    """A uniform water or grass corridor between a jump's start and end."""

    terrain: Terrain
    locations: Tuple[Location, ...]
    occupants: Tuple[Piece, ...]

    @property
    def enemies(self) -> Tuple[Piece, ...]:
        # Own pieces never survive analysis, so every occupant is an enemy.
        return self.occupants

    @property
    def enemy_count(self) -> int:
        return len(self.occupants)

    @property
    def occupant_count(self) -> int:
        return len(self.occupants)


def analyze_path(board: Board, piece: Piece, end: Location) -> JumpPath:
    """Classify the cells strictly between ``piece`` and ``end``.

    Raises NotStraightLine, Impassable or OwnPieceBlocks.
    """
    start = piece.location
    if start == end:
        raise IllegalShape(f"{piece} is already at {end}")
    between = positions_between(start, end)
    if not between:
        raise Impassable(f"No corridor between adjacent cells {start} and {end}")

    cells = [board.cell_at(location) for location in between]
    for location, cell in zip(between, cells):
        if cell is None:
            raise Impassable(f"Corridor leaves the modeled board at {location}")
        if cell.terrain not in JUMP_TERRAINS:
            raise Impassable(f"Corridor crosses {cell.terrain.name.lower()} at {location}")
    corridor_terrain = cells[0].terrain
    for location, cell in zip(between, cells):
        if cell.terrain is not corridor_terrain:
            raise Impassable(f"Corridor mixes water and grass at {location}")

    occupants: List[Piece] = []
    for location in between:
        occupant = board.piece_at(location)
        if occupant is None:
            continue
        if occupant.side is piece.side:
            raise OwnPieceBlocks(f"{occupant} blocks the corridor")
        occupants.append(occupant)

    return JumpPath(terrain=corridor_terrain, locations=tuple(between), occupants=tuple(occupants))
