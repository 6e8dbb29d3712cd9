"""Terrain kinds, the terrain access table and straight-line geometry helpers."""

from __future__ import annotations

from enum import IntEnum
from typing import FrozenSet, List

from engine.errors import NotStraightLine
from engine.location import Location
from engine.pieces import Animal


class Terrain(IntEnum):
    """Cell terrain. Values double as codes in the board's terrain grid."""

    PLAIN = 0
    WATER = 1
    GRASS = 2
    TREASURE = 3
    HOME = 4
    TRAP = 5


# Grid code for coordinates the board does not model.
UNMODELED = -1

JUMP_TERRAINS: FrozenSet[Terrain] = frozenset({Terrain.WATER, Terrain.GRASS})
OWNABLE_TERRAINS: FrozenSet[Terrain] = frozenset({Terrain.HOME, Terrain.TRAP})

AQUATIC_ANIMALS: FrozenSet[Animal] = frozenset({Animal.OX, Animal.TIGER, Animal.SNAKE, Animal.DOG})
WATER_JUMPERS: FrozenSet[Animal] = frozenset({Animal.TIGER, Animal.DRAGON})
GRASS_JUMPERS: FrozenSet[Animal] = frozenset({Animal.TIGER, Animal.DRAGON, Animal.MONKEY})


def can_enter(terrain: Terrain, animal: Animal) -> bool:
    """Return whether an animal may stand on a terrain.

    Grass is open to everyone; only jumping across it is restricted.
    """
    if terrain is Terrain.WATER:
        return animal in AQUATIC_ANIMALS
    return True


def is_water_jumper(animal: Animal) -> bool:
    return animal in WATER_JUMPERS


def is_grass_jumper(animal: Animal) -> bool:
    return animal in GRASS_JUMPERS


def can_jump(terrain: Terrain, animal: Animal) -> bool:
    """Return whether an animal may jump a corridor of the given terrain."""
    if terrain is Terrain.WATER:
        return is_water_jumper(animal)
    if terrain is Terrain.GRASS:
        return is_grass_jumper(animal)
    return False


def is_straight_line(start: Location, end: Location) -> bool:
    """Return whether locations are aligned orthogonally."""
    return start.is_aligned(end)


def positions_between(start: Location, end: Location) -> List[Location]:
    """Return locations strictly between two aligned locations, nearest first."""
    if not is_straight_line(start, end):
        raise NotStraightLine(f"{start} and {end} share neither row nor column")
    between: List[Location] = []
    if start.y == end.y:
        step = 1 if end.x > start.x else -1
        for x in range(start.x + step, end.x, step):
            between.append(Location(x, start.y))
    else:
        step = 1 if end.y > start.y else -1
        for y in range(start.y + step, end.y, step):
            between.append(Location(start.x, y))
    return between
