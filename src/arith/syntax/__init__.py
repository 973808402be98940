"""Concrete syntax: scanner and parser."""

from arith.syntax.lexer import Token, scan
from arith.syntax.parse import Parser, parse_file, parse_term

__all__ = ["Parser", "Token", "parse_file", "parse_term", "scan"]
