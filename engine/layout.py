"""Build boards and matches from text grids and JSON layout files.

Terrain rows use one character per cell::

    .  plain      W  water      G  grass
    T  treasure   H  home       X  trap
    # or space    not part of the board

Owner rows use ``b`` (blue), ``r`` (red) or ``.`` (neutral). Rows shorter than
the board, and missing rows, are padded with unmodeled cells.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

import numpy as np

from engine.board import NEUTRAL_CODE, SIDE_CODE, Board
from engine.config import RulesConfig
from engine.errors import LayoutError
from engine.location import BOARD_COLS, BOARD_ROWS, Location
from engine.match import MatchContext
from engine.pieces import Animal, Side
from engine.registry import PieceRegistry
from engine.rules import UNMODELED, Terrain

LOGGER = logging.getLogger(__name__)

TERRAIN_CHARS: Dict[str, int] = {
    ".": int(Terrain.PLAIN),
    "W": int(Terrain.WATER),
    "G": int(Terrain.GRASS),
    "T": int(Terrain.TREASURE),
    "H": int(Terrain.HOME),
    "X": int(Terrain.TRAP),
    "#": UNMODELED,
    " ": UNMODELED,
}

OWNER_CHARS: Dict[str, int] = {
    ".": NEUTRAL_CODE,
    " ": NEUTRAL_CODE,
    "b": SIDE_CODE[Side.BLUE],
    "r": SIDE_CODE[Side.RED],
}


def _parse_grid(rows: Sequence[str], alphabet: Mapping[str, int], fill: int, label: str) -> np.ndarray:
    if len(rows) > BOARD_ROWS:
        raise LayoutError(f"{label} has {len(rows)} rows, the board has {BOARD_ROWS}")
    grid = np.full((BOARD_ROWS, BOARD_COLS), fill, dtype=np.int8)
    for y, row in enumerate(rows):
        if len(row) > BOARD_COLS:
            raise LayoutError(f"{label} row {y} has {len(row)} cells, the board has {BOARD_COLS}")
        for x, char in enumerate(row):
            if char not in alphabet:
                raise LayoutError(f"Unknown {label} character {char!r} at ({x},{y})")
            grid[y, x] = alphabet[char]
    return grid


def build_board(
    terrain_rows: Sequence[str],
    owner_rows: Optional[Sequence[str]] = None,
    registry: Optional[PieceRegistry] = None,
) -> Board:
    """Create a board from terrain (and optional owner) character rows."""
    terrain = _parse_grid(terrain_rows, TERRAIN_CHARS, UNMODELED, "terrain")
    owners = None
    if owner_rows is not None:
        owners = _parse_grid(owner_rows, OWNER_CHARS, NEUTRAL_CODE, "owner")
    return Board(terrain, owners, registry=registry)


def place_pieces(board: Board, placements: Sequence[Mapping[str, Any]]) -> None:
    """Spawn pieces described as ``{"animal", "side", "x", "y"}`` mappings."""
    for entry in placements:
        try:
            animal = Animal.parse(entry["animal"])
            side = Side(entry["side"])
            location = Location(int(entry["x"]), int(entry["y"]))
        except KeyError as exc:
            raise LayoutError(f"Piece entry {dict(entry)} is missing {exc}") from None
        except ValueError as exc:
            raise LayoutError(f"Bad piece entry {dict(entry)}: {exc}") from None
        if board.cell_at(location) is None:
            raise LayoutError(f"Piece entry {dict(entry)} is off the modeled board")
        board.pieces.spawn(animal, side, location)


def build_match(payload: Mapping[str, Any], config: Optional[RulesConfig] = None) -> MatchContext:
    """Create a ready match from a layout document.

    An explicit ``config`` wins over the document's ``rules`` section.
    """
    if "terrain" not in payload:
        raise LayoutError("Layout is missing the 'terrain' grid")
    board = build_board(payload["terrain"], payload.get("owners"))
    place_pieces(board, payload.get("pieces", []))
    if config is None:
        config = RulesConfig.from_dict(payload.get("rules", {}))
    LOGGER.info("Loaded layout with %d pieces", len(board.pieces))
    return MatchContext(board=board, config=config)


def load_layout(path: str | Path, config: Optional[RulesConfig] = None) -> MatchContext:
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return build_match(payload, config)
