from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import StrEnum


class PieceType(StrEnum):
    I = "I"  # noqa: E741
    O = "O"  # noqa: E741
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


# Fixed order matters: seeded factories must reproduce the same sequence.
PIECE_TYPES: tuple[PieceType, ...] = tuple(PieceType)


@dataclass(frozen=True, slots=True)
class Piece:
    type: PieceType
    id: int

    @property
    def label(self) -> str:
        return f"ID:{self.id}({self.type.value})"


@dataclass(slots=True)
class IdSequence:
    """Monotonic piece id counter.

    One instance is created per session and handed to its factory; it is never reset,
    so ids stay unique for the lifetime of that session.
    """

    next_id: int = 1

    def take(self) -> int:
        value = self.next_id
        self.next_id += 1
        return value


@dataclass(slots=True)
class PieceFactory:
    rng: random.Random
    ids: IdSequence = field(default_factory=IdSequence)
    types: tuple[PieceType, ...] = PIECE_TYPES

    @classmethod
    def from_seed(cls, seed: int) -> "PieceFactory":
        return cls(rng=random.Random(seed))

    def generate(self) -> Piece:
        """Create the next piece: uniformly random type, next sequential id."""

        return Piece(type=self.rng.choice(self.types), id=self.ids.take())
