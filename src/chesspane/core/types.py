"""Board coordinate value type and helpers.

Board layout (as displayed, White at the bottom)::

    rank 0:  a8 b8 ... h8   (Black's back rank)
    rank 1:  a7 b7 ... h7
    ...
    rank 7:  a1 b1 ... h1   (White's back rank)
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


class Coordinate(NamedTuple):
    """Immutable ``(rank, file)`` pair; equality is structural."""

    rank: int
    file: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.rank < BOARD_SIZE and 0 <= self.file < BOARD_SIZE

    @property
    def is_light(self) -> bool:
        """Checkerboard parity of the square."""
        return (self.rank + self.file) % 2 == 0

    def offset(self, d_rank: int, d_file: int) -> Coordinate:
        return Coordinate(self.rank + d_rank, self.file + d_file)

    def __str__(self) -> str:
        return square_name(self)


def square_name(coord: Coordinate) -> str:
    """Algebraic name, e.g. ``(6, 4)`` → ``'e2'``."""
    return chr(ord("a") + coord.file) + str(BOARD_SIZE - coord.rank)


def parse_square(name: str) -> Coordinate:
    """Parse an algebraic square name, e.g. ``'e4'`` → ``(4, 4)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Coordinate(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


ALL_COORDINATES: tuple[Coordinate, ...] = tuple(
    Coordinate(r, f) for r in range(BOARD_SIZE) for f in range(BOARD_SIZE)
)
