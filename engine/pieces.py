"""Piece definitions: sides, animal ranks and the live piece record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict

from engine.location import Location


class Side(str, Enum):
    """Player side."""

    BLUE = "blue"
    RED = "red"

    def opponent(self) -> "Side":
        return Side.RED if self is Side.BLUE else Side.BLUE


class Animal(IntEnum):
    """Animal kinds; the enum value is the combat rank (1 weakest, 13 strongest)."""

    PIG = 1
    DOG = 2
    CHICKEN = 3
    MONKEY = 4
    GOAT = 5
    HORSE = 6
    SNAKE = 7
    DRAGON = 8
    RABBIT = 9
    TIGER = 10
    OX = 11
    RAT = 12
    CAT = 13

    @property
    def rank(self) -> int:
        return int(self.value)

    @classmethod
    def parse(cls, value: object) -> "Animal":
        """Accept an Animal, a rank number or an animal name."""
        if isinstance(value, Animal):
            return value
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                return cls(int(name))
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"Unknown animal: {value!r}") from None
        raise ValueError(f"Unknown animal: {value!r}")


SIDE_PREFIX: Dict[Side, str] = {
    Side.BLUE: "b",
    Side.RED: "r",
}

ANIMAL_SYMBOL: Dict[Animal, str] = {
    Animal.PIG: "Pg",
    Animal.DOG: "Dg",
    Animal.CHICKEN: "Ck",
    Animal.MONKEY: "Mk",
    Animal.GOAT: "Gt",
    Animal.HORSE: "Hs",
    Animal.SNAKE: "Sn",
    Animal.DRAGON: "Dr",
    Animal.RABBIT: "Rb",
    Animal.TIGER: "Tg",
    Animal.OX: "Ox",
    Animal.RAT: "Rt",
    Animal.CAT: "Ct",
}


@dataclass(eq=False)
class Piece:
    """A live piece on the board.

    Identity is the ``piece_id`` handed out by the registry; two pieces with the
    same animal and side are still different pieces.
    """

    piece_id: int
    animal: Animal
    side: Side
    location: Location

    @property
    def rank(self) -> int:
        return self.animal.rank

    @property
    def symbol(self) -> str:
        return f"{SIDE_PREFIX[self.side]}{ANIMAL_SYMBOL[self.animal]}"

    def __str__(self) -> str:
        return f"{self.side.value} {self.animal.name.lower()}#{self.piece_id}@{self.location}"
