"""Game session layer - board store, selection state machine, decorations.

Quick start::

    from chesspane.game import SelectionController

    ctrl = SelectionController(client)   # client: IEngineClient
    ctrl.new_session()
    ...
    ctrl.click(parse_square("e2"))
"""

from chesspane.game.controller import SelectionController, SessionEvents
from chesspane.game.decoration import (
    Highlight,
    board_highlights,
    changed_highlights,
    square_highlight,
)
from chesspane.game.interfaces import IEngineClient, SelectionPhase
from chesspane.game.state import SelectionState, SessionState
from chesspane.game.store import BoardStore

__all__ = [
    # Interfaces
    "IEngineClient",
    "SelectionPhase",
    # Concrete
    "BoardStore",
    "Highlight",
    "SelectionController",
    "SelectionState",
    "SessionEvents",
    "SessionState",
    # Decoration
    "board_highlights",
    "changed_highlights",
    "square_highlight",
]
