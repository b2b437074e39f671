"""Custom exception types used across :mod:`relaxtable`."""

from __future__ import annotations


class RelaxTableError(Exception):
    """Base class for all package-specific errors."""


class InputError(RelaxTableError, ValueError):
    """Raised for invalid user input such as malformed edges."""


class NegativeWeightError(InputError):
    """Raised when an edge is added with a weight below zero."""


class GraphFormatError(InputError):
    """Raised when parsing a graph file fails."""


class EmptyGraphError(RelaxTableError, ValueError):
    """Raised when shortest paths are requested on a graph with no edges."""


class UnknownVertexError(RelaxTableError, KeyError):
    """Raised when a distance-table row is looked up for an unregistered key."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message and add quotes
        return str(self.args[0]) if self.args else ""


class ConfigError(RelaxTableError, ValueError):
    """Raised for invalid configuration options."""


class AlgorithmError(RelaxTableError, RuntimeError):
    """Raised when the engine is driven out of order."""


__all__ = [
    "RelaxTableError",
    "InputError",
    "NegativeWeightError",
    "GraphFormatError",
    "EmptyGraphError",
    "UnknownVertexError",
    "ConfigError",
    "AlgorithmError",
]
