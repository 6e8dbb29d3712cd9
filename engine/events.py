"""Fire-and-forget notifications for the presentation layer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from engine.location import Location
from engine.pieces import Piece, Side
from engine.turns import Phase

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PieceMoved:
    piece: Piece
    origin: Location
    target: Location


@dataclass(frozen=True)
class PieceCaptured:
    piece: Piece
    location: Location
    by: Optional[Piece] = None


@dataclass(frozen=True)
class PieceEnteredTrap:
    piece: Piece
    location: Location


@dataclass(frozen=True)
class PieceExitedTrap:
    piece: Piece
    location: Location


@dataclass(frozen=True)
class TurnAdvanced:
    """Active side changed; any UI selection should be dropped."""

    side: Side
    budget: int
    phase: Phase


Event = Union[PieceMoved, PieceCaptured, PieceEnteredTrap, PieceExitedTrap, TurnAdvanced]
Listener = Callable[[Event], None]


class EventBus:
    """Synchronous publish/subscribe hub."""

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, event: Event) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                LOGGER.exception("Listener %r failed on %s", listener, type(event).__name__)
