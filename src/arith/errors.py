"""Errors raised while reading and parsing arith programs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arith.syntax.lexer import Token


class ArithError(Exception):
    """Base class for every error the command line reports."""


class ScanError(ArithError):
    pass


class ParseError(ArithError):
    pass


@dataclass
class InvalidTokenError(ScanError):
    """A whitespace-delimited word that is not in the vocabulary."""

    text: str
    line: int | None = None

    def __str__(self) -> str:
        if self.line is None:
            return f'invalid token "{self.text}"'
        return f'invalid token "{self.text}" on line {self.line}'


@dataclass
class ScanIOError(ScanError):
    """The input could not be read."""

    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


@dataclass
class UnexpectedTokenError(ParseError):
    """A token that cannot start a term, including a premature end of input."""

    token: Token

    def __str__(self) -> str:
        return f'unexpected token "{self.token}"'


@dataclass
class ExpectedTokenError(ParseError):
    """A required token did not match what the scanner produced."""

    wanted: Token
    got: Token

    def __str__(self) -> str:
        return f'expected token "{self.wanted}", got "{self.got}"'


__all__ = [
    "ArithError",
    "ScanError",
    "ParseError",
    "InvalidTokenError",
    "ScanIOError",
    "UnexpectedTokenError",
    "ExpectedTokenError",
]
