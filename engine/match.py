"""Match context and the command gate, the only way to change a match."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple, Union

from engine.board import Board, Cell
from engine.combat import CombatResult, fight, is_trapped
from engine.config import RulesConfig
from engine.errors import AlreadyMoved, LayoutError, MoveError, OutOfTurn
from engine.events import (
    Event,
    EventBus,
    PieceCaptured,
    PieceEnteredTrap,
    PieceExitedTrap,
    PieceMoved,
    TurnAdvanced,
)
from engine.location import Location
from engine.pieces import Piece, Side
from engine.registry import PieceRef, PieceRegistry
from engine.turns import Phase, TurnState
from engine.validator import MoveKind, MovePlan, MoveValidator

LOGGER = logging.getLogger(__name__)

Target = Union[Location, Tuple[int, int]]


@dataclass
class MatchContext:
    """Everything one match owns: board, pieces, turn state, rules and events."""

    board: Board
    config: RulesConfig = field(default_factory=RulesConfig)
    turns: Optional[TurnState] = None
    events: EventBus = field(default_factory=EventBus)

    def __post_init__(self) -> None:
        if self.turns is None:
            self.turns = TurnState(self.config)
        for piece in self.pieces:
            if self.board.cell_at(piece.location) is None:
                raise LayoutError(f"{piece} stands on an unmodeled cell")

    @property
    def pieces(self) -> PieceRegistry:
        return self.board.pieces


@dataclass(frozen=True)
class MoveOutcome:
    """What a committed move did."""

    piece: Piece
    origin: Location
    target: Location
    kind: MoveKind
    captured: Tuple[Piece, ...]
    combat: Optional[CombatResult]
    mover_survived: bool
    trapped: bool
    turn_advanced: bool


class CommandGate:
    """Validates and commits moves for one match.

    A lock serializes commands so board, registry and turn state always change
    together.
    """

    def __init__(self, context: MatchContext) -> None:
        self.context = context
        self.validator = MoveValidator(context.board, context.config)
        self._lock = threading.RLock()

    def cell_at(self, location: Target) -> Optional[Cell]:
        return self.context.board.cell_at(Location.coerce(location))

    def piece_at(self, location: Target) -> Optional[Piece]:
        return self.context.board.piece_at(Location.coerce(location))

    def active_side(self) -> Side:
        return self.context.turns.active_side

    def phase(self) -> Phase:
        return self.context.turns.phase

    def remaining_moves_this_cycle(self) -> int:
        return self.context.turns.remaining_moves

    def legal_destinations(self, piece_ref: PieceRef) -> Set[Location]:
        """Where the piece may move right now; empty once it has moved this turn."""
        with self._lock:
            piece = self.context.pieces.get(piece_ref)
            if self.context.turns.has_moved(piece):
                return set()
            return self.validator.destinations(piece)

    def submit_move(
        self,
        piece_ref: PieceRef,
        target: Target,
        ignore_turn_ownership: bool = False,
        advance_turn: bool = True,
    ) -> MoveOutcome:
        """Validate and commit a move; raises a MoveError with state untouched."""
        with self._lock:
            try:
                plan = self._validate(piece_ref, target, ignore_turn_ownership)
            except MoveError as exc:
                LOGGER.debug("Rejected %r -> %r: %s (%s)", piece_ref, target, exc, exc.code)
                raise
            outcome, events = self._commit(plan, advance_turn)

        for event in events:
            self.context.events.publish(event)
        return outcome

    def _validate(self, piece_ref: PieceRef, target: Target, ignore_turn_ownership: bool) -> MovePlan:
        location = Location.coerce(target)
        piece = self.context.pieces.get(piece_ref)
        turns = self.context.turns
        if not ignore_turn_ownership and piece.side is not turns.active_side:
            raise OutOfTurn(f"{piece} cannot move during {turns.active_side.value}'s turn")
        if turns.has_moved(piece):
            raise AlreadyMoved(f"{piece} already moved this turn")
        return self.validator.plan(piece, location)

    def _commit(self, plan: MovePlan, advance_turn: bool) -> Tuple[MoveOutcome, List[Event]]:
        board = self.context.board
        pieces = self.context.pieces
        piece = plan.piece
        events: List[Event] = []
        captured: List[Piece] = []
        was_trapped = is_trapped(board, piece)

        if plan.path is not None:
            for enemy in plan.path.enemies:
                events.append(PieceCaptured(piece=enemy, location=enemy.location, by=piece))
                pieces.remove(enemy)
                captured.append(enemy)
                LOGGER.info("%s jumped over and removed %s", piece, enemy)

        combat: Optional[CombatResult] = None
        survived = True
        defender = plan.defender
        if defender is not None:
            combat = fight(board, piece, defender)
            if combat is not CombatResult.DEFENDER_WINS:
                events.append(PieceCaptured(piece=defender, location=defender.location, by=piece))
                pieces.remove(defender)
                captured.append(defender)
            if combat is not CombatResult.ATTACKER_WINS:
                events.append(PieceCaptured(piece=piece, location=piece.location, by=defender))
                pieces.remove(piece)
                survived = False
            LOGGER.info("%s attacked %s: %s", piece, defender, combat.value)

        trapped = False
        if survived:
            pieces.relocate(piece, plan.target)
            events.append(PieceMoved(piece=piece, origin=plan.origin, target=plan.target))
            trapped = is_trapped(board, piece)
            if trapped and not was_trapped:
                LOGGER.info("%s is caught in a trap, strength drops to 0", piece)
                events.append(PieceEnteredTrap(piece=piece, location=plan.target))
            elif was_trapped and not trapped:
                LOGGER.info("%s escaped a trap", piece)
                events.append(PieceExitedTrap(piece=piece, location=plan.target))

        turns = self.context.turns
        turn_advanced = False
        if advance_turn:
            turn_advanced = turns.record_move(piece)
        else:
            turns.mark_moved(piece)
        if turn_advanced:
            events.append(TurnAdvanced(side=turns.active_side, budget=turns.budget, phase=turns.phase))

        LOGGER.info("%s move %s -> %s committed", plan.kind.value, plan.origin, plan.target)
        outcome = MoveOutcome(
            piece=piece,
            origin=plan.origin,
            target=plan.target,
            kind=plan.kind,
            captured=tuple(captured),
            combat=combat,
            mover_survived=survived,
            trapped=trapped,
            turn_advanced=turn_advanced,
        )
        return outcome, events
