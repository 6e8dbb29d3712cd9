"""Indexed set of live pieces."""

from __future__ import annotations

import itertools
import logging
from typing import Dict, Iterator, List, Optional, Union

from engine.errors import LayoutError, UnknownPiece
from engine.location import Location
from engine.pieces import Animal, Piece, Side

LOGGER = logging.getLogger(__name__)

PieceRef = Union[Piece, int]


class PieceRegistry:
    """Live pieces indexed by id and by location.

    The location index is the single source of truth for occupancy.
    """

    def __init__(self) -> None:
        self._by_id: Dict[int, Piece] = {}
        self._by_location: Dict[Location, int] = {}
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[Piece]:
        return iter(list(self._by_id.values()))

    def __contains__(self, piece: object) -> bool:
        return isinstance(piece, Piece) and self._by_id.get(piece.piece_id) is piece

    def spawn(self, animal: Animal, side: Side, location: Location) -> Piece:
        """Create a piece at setup time."""
        if location in self._by_location:
            raise LayoutError(f"{location} is already occupied by {self.at(location)}")
        piece = Piece(piece_id=next(self._ids), animal=animal, side=side, location=location)
        self._by_id[piece.piece_id] = piece
        self._by_location[location] = piece.piece_id
        LOGGER.debug("Spawned %s", piece)
        return piece

    def get(self, piece_ref: PieceRef) -> Piece:
        """Resolve a piece or piece id to the live piece."""
        piece_id = piece_ref.piece_id if isinstance(piece_ref, Piece) else piece_ref
        piece = self._by_id.get(piece_id)
        if piece is None or (isinstance(piece_ref, Piece) and piece is not piece_ref):
            raise UnknownPiece(f"No live piece for {piece_ref!r}")
        return piece

    def at(self, location: Location) -> Optional[Piece]:
        piece_id = self._by_location.get(location)
        return None if piece_id is None else self._by_id[piece_id]

    def by_side(self, side: Side) -> List[Piece]:
        return [piece for piece in self._by_id.values() if piece.side is side]

    def relocate(self, piece: Piece, target: Location) -> None:
        """Move a piece to an empty location."""
        occupant = self.at(target)
        if occupant is not None and occupant is not piece:
            raise RuntimeError(f"Cannot relocate {piece} onto occupied {target}")
        del self._by_location[piece.location]
        piece.location = target
        self._by_location[target] = piece.piece_id

    def remove(self, piece: Piece) -> None:
        """Remove a captured piece for good."""
        self.get(piece)
        del self._by_id[piece.piece_id]
        del self._by_location[piece.location]
