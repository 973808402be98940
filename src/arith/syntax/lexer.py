"""Scanner for arith programs.

The vocabulary is fixed: nine reserved words separated by whitespace. The
lexer matches whole whitespace-delimited runs and classifies each one, so an
unknown word is reported in full rather than cut at the first bad character.
"""

from __future__ import annotations

from enum import Enum
from typing import BinaryIO, Iterator

import ply.lex as lex  # type: ignore[import-untyped]

from arith.errors import InvalidTokenError, ScanIOError

MAX_TOKEN_LENGTH = 6


class Token(Enum):
    EOF = "EOF"
    TRUE = "true"
    FALSE = "false"
    IF = "if"
    THEN = "then"
    ELSE = "else"
    ZERO = "0"
    SUCC = "succ"
    PRED = "pred"
    ISZERO = "iszero"

    def __str__(self) -> str:
        return self.value


reserved = {tok.value: tok.name for tok in Token if tok is not Token.EOF}

tokens = ("WORD", *reserved.values())

t_ignore = " \t\r\f\v"


def t_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def _printable(word: str) -> str:
    return word.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def t_WORD(t: lex.LexToken) -> lex.LexToken:
    r"\S+"
    if len(t.value) > MAX_TOKEN_LENGTH or t.value not in reserved:
        raise InvalidTokenError(_printable(t.value), t.lineno)
    t.type = reserved[t.value]
    return t


def t_error(t: lex.LexToken) -> None:
    # Only whitespace outside t_ignore (e.g. U+00A0) can get here.
    t.lexer.skip(1)


_LEXER = None


def _lexer() -> lex.Lexer:
    global _LEXER
    if _LEXER is None:
        _LEXER = lex.lex()
    lexer = _LEXER.clone()
    lexer.lineno = 1
    return lexer


def _tokens(lexer: lex.Lexer, text: str) -> Iterator[Token]:
    lexer.input(text)
    for tok in iter(lexer.token, None):
        yield Token[tok.type]


def scan(source: str) -> Iterator[Token]:
    """Yield the tokens of ``source`` followed by a single ``Token.EOF``.

    The sequence is lazy: an invalid word raises :class:`InvalidTokenError`
    only when the scan reaches it.
    """

    yield from _tokens(_lexer(), source)
    yield Token.EOF


def scan_stream(stream: BinaryIO, name: str) -> Iterator[Token]:
    """Yield the tokens of a byte stream, reading it one line at a time.

    Bytes that are not UTF-8 are kept as part of their word, which then fails
    as an invalid token. Only :class:`OSError` from the stream becomes
    :class:`ScanIOError`.
    """

    lexer = _lexer()
    lines = iter(stream)
    lineno = 0
    while True:
        try:
            line = next(lines, None)
        except OSError as exc:
            raise ScanIOError(name, exc.strerror or str(exc)) from exc
        if line is None:
            break
        lineno += 1
        lexer.lineno = lineno
        yield from _tokens(lexer, line.decode("utf-8", "surrogateescape"))
    yield Token.EOF


__all__ = ["MAX_TOKEN_LENGTH", "Token", "scan", "scan_stream"]
