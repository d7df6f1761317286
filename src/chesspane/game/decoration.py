"""Per-square highlight derivation.

Highlights are recomputed from ``(square, board, selection)`` on every
change instead of being stored on squares, so they cannot drift out of
sync with the selection.

Priority (highest first): selected > legal destination > last moved > base.
"""

from __future__ import annotations

from enum import IntEnum, auto

from chesspane.core.board import BoardState
from chesspane.core.types import ALL_COORDINATES, Coordinate
from chesspane.game.state import SelectionState


class Highlight(IntEnum):
    """Decoration of a single square."""

    LIGHT = auto()
    DARK = auto()
    LAST_MOVED = auto()
    LEGAL_DESTINATION = auto()
    SELECTED = auto()


Highlights = dict[Coordinate, Highlight]


def square_highlight(
    square: Coordinate,
    board: BoardState,
    selection: SelectionState,
    *,
    show_legal: bool = True,
) -> Highlight:
    """Decoration of *square* for the given board and selection."""
    del board  # geometry and selection only
    if square == selection.origin:
        return Highlight.SELECTED
    if show_legal and square in selection.legal_destinations:
        return Highlight.LEGAL_DESTINATION
    if square == selection.last_moved:
        return Highlight.LAST_MOVED
    return Highlight.LIGHT if square.is_light else Highlight.DARK


def board_highlights(
    board: BoardState,
    selection: SelectionState,
    *,
    show_legal: bool = True,
) -> Highlights:
    return {
        sq: square_highlight(sq, board, selection, show_legal=show_legal)
        for sq in ALL_COORDINATES
    }


def changed_highlights(before: Highlights, after: Highlights) -> frozenset[Coordinate]:
    """Squares whose decoration differs between two derivations."""
    return frozenset(sq for sq in ALL_COORDINATES if before.get(sq) != after.get(sq))
