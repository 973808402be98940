"""Untyped arithmetic expressions: scanner, parser and evaluators."""

from arith.ast import FalseTm, If, IsZero, Pred, Succ, Term, TrueTm, Zero
from arith.errors import ArithError
from arith.eval import Strategy, eval_big_step, eval_small_step, evaluate, step
from arith.pretty import pretty, render_tree
from arith.syntax.parse import parse_term

__all__ = [
    "ArithError",
    "FalseTm",
    "If",
    "IsZero",
    "Pred",
    "Strategy",
    "Succ",
    "Term",
    "TrueTm",
    "Zero",
    "eval_big_step",
    "eval_small_step",
    "evaluate",
    "parse_term",
    "pretty",
    "render_tree",
    "step",
]
