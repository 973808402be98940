import io

import pytest

from arith.ast import FalseTm, If, IsZero, Pred, Succ, TrueTm, Zero
from arith.errors import (
    ExpectedTokenError,
    InvalidTokenError,
    ScanIOError,
    UnexpectedTokenError,
)
from arith.syntax.lexer import Token
from arith.syntax.parse import Parser, parse_file, parse_term


@pytest.mark.parametrize(
    ("src", "expected"),
    [
        ("true", TrueTm()),
        ("false", FalseTm()),
        ("0", Zero()),
        ("succ succ 0", Succ(Succ(Zero()))),
        ("iszero pred succ 0", IsZero(Pred(Succ(Zero())))),
        ("if true then 0 else succ 0", If(TrueTm(), Zero(), Succ(Zero()))),
    ],
)
def test_parse_term(src: str, expected) -> None:
    assert parse_term(src) == expected


def test_if_arguments_keep_their_positions() -> None:
    src = "if iszero 0 then if false then 0 else true else pred 0"
    assert parse_term(src) == If(
        IsZero(Zero()),
        If(FalseTm(), Zero(), TrueTm()),
        Pred(Zero()),
    )


def test_ill_typed_programs_still_parse() -> None:
    assert parse_term("if 0 then true else false") == If(Zero(), TrueTm(), FalseTm())
    assert parse_term("succ true") == Succ(TrueTm())


def test_missing_else() -> None:
    with pytest.raises(ExpectedTokenError, match='expected token "else", got "EOF"') as info:
        parse_term("if true then 0")
    assert info.value.wanted is Token.ELSE
    assert info.value.got is Token.EOF


def test_wrong_token_in_then_position() -> None:
    with pytest.raises(ExpectedTokenError, match='expected token "then", got "else"'):
        parse_term("if true else 0 then 0")


def test_empty_program() -> None:
    with pytest.raises(UnexpectedTokenError, match='unexpected token "EOF"'):
        parse_term("")


def test_truncated_operator() -> None:
    with pytest.raises(UnexpectedTokenError, match='unexpected token "EOF"'):
        parse_term("succ pred")


def test_keyword_cannot_start_a_term() -> None:
    with pytest.raises(UnexpectedTokenError, match='unexpected token "then"') as info:
        parse_term("then")
    assert info.value.token is Token.THEN


def test_trailing_tokens_are_rejected() -> None:
    with pytest.raises(ExpectedTokenError, match='expected token "EOF", got "0"'):
        parse_term("true 0")


def test_parser_without_eof_check_leaves_rest_unread() -> None:
    parser = Parser([Token.SUCC, Token.ZERO, Token.TRUE, Token.EOF])
    assert parser.parse() == Succ(Zero())
    assert parser.parse() == TrueTm()
    parser.expect(Token.EOF)


def test_invalid_token_aborts_parse() -> None:
    with pytest.raises(InvalidTokenError, match="iszer"):
        parse_term("iszer 0")


def test_parse_file() -> None:
    stream = io.BytesIO(b"if false then true\nelse iszero 0\n")
    assert parse_file(stream, "prog.arith") == If(FalseTm(), TrueTm(), IsZero(Zero()))


def test_parse_file_read_failure() -> None:
    class Broken(io.RawIOBase):
        def readable(self) -> bool:
            return True

        def readinto(self, b) -> int:
            raise OSError(5, "Input/output error")

    with pytest.raises(ScanIOError, match="prog.arith: Input/output error"):
        parse_file(Broken(), "prog.arith")
