"""Recursive-descent parser for arith programs.

Grammar::

    term := "true" | "false" | "0"
          | "succ" term | "pred" term | "iszero" term
          | "if" term "then" term "else" term
"""

from __future__ import annotations

from typing import BinaryIO, Iterable, Iterator

from arith.ast import FalseTm, If, IsZero, Pred, Succ, Term, TrueTm, Zero
from arith.errors import ExpectedTokenError, UnexpectedTokenError
from arith.syntax.lexer import Token, scan, scan_stream


class Parser:
    """Build terms from a token stream, consuming it left to right."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: Iterator[Token] = iter(tokens)

    def _next(self) -> Token:
        return next(self._tokens, Token.EOF)

    def expect(self, want: Token) -> None:
        got = self._next()
        if got is not want:
            raise ExpectedTokenError(want, got)

    def parse(self) -> Term:
        """Parse exactly one term; trailing tokens are left unread."""

        match self._next():
            case Token.TRUE:
                return TrueTm()
            case Token.FALSE:
                return FalseTm()
            case Token.ZERO:
                return Zero()
            case Token.SUCC:
                return Succ(self.parse())
            case Token.PRED:
                return Pred(self.parse())
            case Token.ISZERO:
                return IsZero(self.parse())
            case Token.IF:
                cond = self.parse()
                self.expect(Token.THEN)
                then = self.parse()
                self.expect(Token.ELSE)
                else_ = self.parse()
                return If(cond, then, else_)
            case tok:
                raise UnexpectedTokenError(tok)

    def parse_program(self) -> Term:
        """Parse one term and require the input to end right after it."""

        term = self.parse()
        self.expect(Token.EOF)
        return term


def parse_term(source: str) -> Term:
    return Parser(scan(source)).parse_program()


def parse_file(stream: BinaryIO, name: str) -> Term:
    """Parse the program in ``stream``, reading it only as far as needed."""

    return Parser(scan_stream(stream, name)).parse_program()


__all__ = ["Parser", "parse_term", "parse_file"]
