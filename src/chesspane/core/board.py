"""BoardState - immutable, engine-confirmed 8x8 grid plus turn counter."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from chesspane.core.enums import Color, PieceKind, active_color
from chesspane.core.piece import Piece
from chesspane.core.types import ALL_COORDINATES, BOARD_SIZE, Coordinate

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_KIND_BY_LETTER: dict[str, PieceKind] = {
    "k": PieceKind.KING,
    "q": PieceKind.QUEEN,
    "r": PieceKind.ROOK,
    "b": PieceKind.BISHOP,
    "n": PieceKind.KNIGHT,
    "p": PieceKind.PAWN,
}

Grid = tuple[tuple[Piece, ...], ...]


@dataclass(frozen=True, slots=True)
class BoardState:
    """Piece grid indexed by ``(rank, file)`` and a non-negative turn counter.

    Instances are never mutated; a confirmed move produces a new one.
    """

    squares: Grid
    turn: int = 0

    def __post_init__(self) -> None:
        if self.turn < 0:
            raise ValueError(f"Turn must be non-negative, got {self.turn}")
        if len(self.squares) != BOARD_SIZE or any(
            len(row) != BOARD_SIZE for row in self.squares
        ):
            raise ValueError("Board must be 8x8")
        for rank, row in enumerate(self.squares):
            for file, piece in enumerate(row):
                if piece.coordinate != (rank, file):
                    raise ValueError(
                        f"Piece at ({rank}, {file}) claims {piece.coordinate}"
                    )

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_pieces(
        cls, pieces: Sequence[Sequence[Piece]], turn: int = 0
    ) -> BoardState:
        return cls(tuple(tuple(row) for row in pieces), turn)

    @classmethod
    def from_placement(cls, placement: str, turn: int = 0) -> BoardState:
        """Build from a FEN piece-placement field (first row is rank 0)."""
        rows = placement.split("/")
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Placement needs 8 rows, got {len(rows)}: {placement!r}")

        grid: list[list[Piece]] = []
        for rank, text in enumerate(rows):
            row: list[Piece] = []
            for ch in text:
                if ch.isdigit():
                    for _ in range(int(ch)):
                        row.append(Piece.empty(Coordinate(rank, len(row))))
                    continue
                kind = _KIND_BY_LETTER.get(ch.lower())
                if kind is None:
                    raise ValueError(f"Invalid piece character: {ch!r}")
                color = Color.WHITE if ch.isupper() else Color.BLACK
                row.append(Piece(Coordinate(rank, len(row)), kind, color))
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Row {rank} has {len(row)} squares: {text!r}")
            grid.append(row)
        return cls.from_pieces(grid, turn)

    @classmethod
    def starting(cls) -> BoardState:
        return cls.from_placement(STARTING_PLACEMENT)

    # ── Access ───────────────────────────────────────────────────────────

    def __getitem__(self, coord: Coordinate) -> Piece:
        rank, file = coord
        if not (0 <= rank < BOARD_SIZE and 0 <= file < BOARD_SIZE):
            raise IndexError(f"Coordinate off board: {coord}")
        return self.squares[rank][file]

    def __iter__(self) -> Iterator[Piece]:
        for row in self.squares:
            yield from row

    @property
    def active_color(self) -> Color:
        return active_color(self.turn)

    def has_king(self, color: Color) -> bool:
        return any(p.kind == PieceKind.KING and p.color == color for p in self)

    # ── Derivation ───────────────────────────────────────────────────────

    def changed_squares(self, other: BoardState) -> frozenset[Coordinate]:
        """Coordinates whose occupant differs between *self* and *other*."""
        return frozenset(c for c in ALL_COORDINATES if self[c] != other[c])

    def with_move(self, origin: Coordinate, destination: Coordinate) -> BoardState:
        """New state with the piece on *origin* relocated and ``turn + 1``.

        No legality checks; that is the rules engine's job.
        """
        grid = [list(row) for row in self.squares]
        mover = self[origin]
        grid[destination.rank][destination.file] = mover.moved_to(destination)
        grid[origin.rank][origin.file] = Piece.empty(origin)
        return BoardState.from_pieces(grid, self.turn + 1)

    def __str__(self) -> str:
        return "\n".join(" ".join(str(p) for p in row) for row in self.squares)
