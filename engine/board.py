"""Board terrain grid, cell lookup, occupancy queries and rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from engine.errors import LayoutError
from engine.location import BOARD_COLS, BOARD_ROWS, Location
from engine.pieces import Piece, Side
from engine.registry import PieceRegistry
from engine.rules import OWNABLE_TERRAINS, UNMODELED, Terrain

NEUTRAL_CODE = 0
SIDE_CODE: Dict[Side, int] = {
    Side.BLUE: 1,
    Side.RED: 2,
}
_CODE_SIDE = {code: side for side, code in SIDE_CODE.items()}

TERRAIN_GLYPH: Dict[Terrain, str] = {
    Terrain.PLAIN: "..",
    Terrain.WATER: "~~",
    Terrain.GRASS: "\"\"",
    Terrain.TREASURE: "$$",
    Terrain.HOME: "HH",
    Terrain.TRAP: "XX",
}


@dataclass(frozen=True)
class Cell:
    """One modeled square. ``owner`` is ``None`` for neutral cells."""

    location: Location
    terrain: Terrain
    owner: Optional[Side] = None


class Board:
    """Fixed 19x13 terrain grid backed by numpy arrays indexed ``[y, x]``.

    Occupancy lives in the attached ``PieceRegistry``; cells never store pieces.
    """

    rows: int = BOARD_ROWS
    cols: int = BOARD_COLS

    def __init__(
        self,
        terrain: np.ndarray,
        owners: Optional[np.ndarray] = None,
        registry: Optional[PieceRegistry] = None,
    ) -> None:
        terrain = np.array(terrain, dtype=np.int8)
        if terrain.shape != (self.rows, self.cols):
            raise LayoutError(f"Terrain grid must be {self.rows}x{self.cols}, got {terrain.shape}")
        valid_codes = {UNMODELED, *(int(t) for t in Terrain)}
        unknown = set(np.unique(terrain).tolist()) - valid_codes
        if unknown:
            raise LayoutError(f"Unknown terrain codes: {sorted(unknown)}")

        if owners is None:
            owners = np.full((self.rows, self.cols), NEUTRAL_CODE, dtype=np.int8)
        owners = np.array(owners, dtype=np.int8)
        if owners.shape != terrain.shape:
            raise LayoutError(f"Owner grid must match terrain grid shape {terrain.shape}")
        if not set(np.unique(owners).tolist()) <= {NEUTRAL_CODE, *SIDE_CODE.values()}:
            raise LayoutError("Owner grid may only hold neutral, blue or red codes")
        ownable = np.isin(terrain, [int(t) for t in OWNABLE_TERRAINS])
        stray = np.argwhere((owners != NEUTRAL_CODE) & ~ownable)
        if len(stray):
            y, x = (int(v) for v in stray[0])
            raise LayoutError(f"Only home and trap cells can be owned, see ({x},{y})")

        self.terrain = terrain
        self.owners = owners
        self.terrain.setflags(write=False)
        self.owners.setflags(write=False)
        self.pieces = registry if registry is not None else PieceRegistry()

    @classmethod
    def blank(cls, terrain: Terrain = Terrain.PLAIN, registry: Optional[PieceRegistry] = None) -> "Board":
        """Fully modeled board of one terrain kind."""
        grid = np.full((cls.rows, cls.cols), int(terrain), dtype=np.int8)
        return cls(grid, registry=registry)

    def cell_at(self, location: Location) -> Optional[Cell]:
        """Return the cell at a location, or None for unmodeled coordinates."""
        code = int(self.terrain[location.y, location.x])
        if code == UNMODELED:
            return None
        owner = _CODE_SIDE.get(int(self.owners[location.y, location.x]))
        return Cell(location=location, terrain=Terrain(code), owner=owner)

    def piece_at(self, location: Location) -> Optional[Piece]:
        return self.pieces.at(location)

    def traps(self, location: Location, side: Side) -> bool:
        """Return whether a piece of ``side`` standing here loses its strength.

        Neutral traps catch everyone; owned traps catch only the opponent.
        """
        if int(self.terrain[location.y, location.x]) != Terrain.TRAP:
            return False
        owner = _CODE_SIDE.get(int(self.owners[location.y, location.x]))
        return owner is None or owner is not side

    def render_ascii(self) -> str:
        """Return a simple human-readable board representation."""
        lines: List[str] = []
        header = "     " + " ".join(f"{x:>3d}" for x in range(self.cols))
        lines.append(header)
        for y in range(self.rows):
            row_cells: List[str] = []
            for x in range(self.cols):
                location = Location(x, y)
                cell = self.cell_at(location)
                piece = self.piece_at(location)
                if piece is not None:
                    row_cells.append(f"{piece.symbol:>3s}")
                elif cell is None:
                    row_cells.append("   ")
                else:
                    glyph = TERRAIN_GLYPH[cell.terrain]
                    if cell.owner is not None:
                        glyph = glyph[0] + cell.owner.value[0]
                    row_cells.append(f"{glyph:>3s}")
            lines.append(f"{y:>3d}  " + " ".join(row_cells))
        return "\n".join(lines)
