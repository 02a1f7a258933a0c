"""Data models for symbol tags produced by the tag generator."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based row/column location in a file."""

    row: int
    column: int


@dataclass(frozen=True)
class Tag:
    """A named symbol and where it is declared."""

    name: str
    position: Position
    kind: str = ""  # class/function/method/variable
