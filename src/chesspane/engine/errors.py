"""Failure kinds reported by the rules engine or its transport."""

from __future__ import annotations

from enum import IntEnum, auto


class ErrorKind(IntEnum):
    """How a request to the rules engine can fail."""

    ILLEGAL_MOVE = auto()
    STALE_RESPONSE = auto()  # dropped silently, never shown
    TRANSPORT_FAILURE = auto()
    GAME_OVER = auto()


class EngineError(Exception):
    """Base class for errors raised by a rules engine."""

    kind = ErrorKind.TRANSPORT_FAILURE


class IllegalMove(EngineError):
    """The destination is not legal for the origin (or not this side's turn)."""

    kind = ErrorKind.ILLEGAL_MOVE


class GameOver(EngineError):
    """The session has concluded; no further moves are accepted."""

    kind = ErrorKind.GAME_OVER


class TransportFailure(EngineError):
    """The engine could not be reached or did not answer."""

    kind = ErrorKind.TRANSPORT_FAILURE


def error_kind_of(exc: BaseException) -> ErrorKind:
    """Classify *exc*; anything that is not an engine error is a transport failure."""
    if isinstance(exc, EngineError):
        return exc.kind
    return ErrorKind.TRANSPORT_FAILURE
