"""CLI entrypoint for a hot-seat animal chess match in the terminal."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from engine.config import RulesConfig
from engine.errors import MoveError
from engine.events import Event, PieceCaptured, PieceEnteredTrap, PieceExitedTrap, TurnAdvanced
from engine.layout import load_layout
from engine.location import Location
from engine.match import CommandGate
from engine.pieces import Side

HELP_TEXT = "Commands: move <x1> <y1> <x2> <y2> | hints <x> <y> | help | quit"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play animal chess in the terminal.")
    parser.add_argument("--layout", type=str, required=True, help="Path to a layout JSON file")
    parser.add_argument("--config", type=str, default=None, help="Optional rules config JSON")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Python logging level")
    return parser.parse_args(argv)


def describe_event(event: Event) -> str:
    if isinstance(event, PieceCaptured):
        return f"Captured: {event.piece.symbol} at {event.location}"
    if isinstance(event, PieceEnteredTrap):
        return f"{event.piece.symbol} fell into a trap at {event.location}"
    if isinstance(event, PieceExitedTrap):
        return f"{event.piece.symbol} escaped the trap"
    if isinstance(event, TurnAdvanced):
        return f"Turn passes to {event.side.value} ({event.budget} moves)"
    return ""


def print_event(event: Event) -> None:
    message = describe_event(event)
    if message:
        print(message)


def status_line(gate: CommandGate) -> str:
    pieces = gate.context.pieces
    counts = " ".join(f"{side.value}={len(pieces.by_side(side))}" for side in Side)
    return (
        f"Turn: {gate.active_side().value} | Phase: {gate.phase().value} | "
        f"Moves left: {gate.remaining_moves_this_cycle()} | Pieces: {counts}"
    )


def run_command(gate: CommandGate, command: str) -> str:
    """Execute one text command and return the message to show."""
    parts = command.strip().split()
    if not parts:
        return ""
    op = parts[0].lower()
    try:
        if op == "move" and len(parts) == 5:
            x1, y1, x2, y2 = map(int, parts[1:])
            piece = gate.piece_at((x1, y1))
            if piece is None:
                return f"No piece at ({x1},{y1})."
            outcome = gate.submit_move(piece, (x2, y2))
            if not outcome.mover_survived:
                return f"{piece.symbol} was lost attacking {Location(x2, y2)}."
            return f"{piece.symbol} moved to {outcome.target}."
        if op == "hints" and len(parts) == 3:
            x, y = int(parts[1]), int(parts[2])
            piece = gate.piece_at((x, y))
            if piece is None:
                return f"No piece at ({x},{y})."
            targets = sorted(gate.legal_destinations(piece))
            return "Legal targets: " + (", ".join(str(t) for t in targets) if targets else "none")
    except MoveError as exc:
        return f"Rejected ({exc.code}): {exc}"
    except ValueError:
        return "Invalid numeric input."
    return "Invalid command format."


def run_cli(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    logger = logging.getLogger("animalchess.cli")

    config = RulesConfig.from_json(args.config) if args.config else None
    context = load_layout(args.layout, config)
    gate = CommandGate(context)
    context.events.subscribe(print_event)

    logger.info("Rules: %s", context.config.to_dict())
    logger.info("Starting match, %s moves first", gate.active_side().value)
    print(HELP_TEXT)

    while True:
        print()
        print(context.board.render_ascii())
        print(status_line(gate))

        try:
            user_input = input("> ").strip()
        except EOFError:
            break
        if user_input.lower() in {"quit", "exit"}:
            print("Exiting game.")
            break
        if user_input.lower() == "help":
            print(HELP_TEXT)
            continue
        message = run_command(gate, user_input)
        if message:
            print(message)


if __name__ == "__main__":
    run_cli()
