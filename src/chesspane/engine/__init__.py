"""Rules engine package: contract, error kinds, reference engine and Qt bridge."""

from chesspane.engine.errors import (
    EngineError,
    ErrorKind,
    GameOver,
    IllegalMove,
    TransportFailure,
    error_kind_of,
)
from chesspane.engine.interfaces import IRulesEngine
from chesspane.engine.rules import LocalRulesEngine

__all__ = [
    "EngineError",
    "ErrorKind",
    "GameOver",
    "IRulesEngine",
    "IllegalMove",
    "LocalRulesEngine",
    "TransportFailure",
    "error_kind_of",
]
