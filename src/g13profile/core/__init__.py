"""Core runtime components."""

from .reactor import ProtocolReactor, ReactorState

__all__ = [
    "ProtocolReactor",
    "ReactorState",
]
