"""Abstract syntax tree nodes for the untyped calculus of booleans and numbers."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TypeAlias


@dataclass(frozen=True)
class TrueTm:
    """The boolean constant ``true``."""


@dataclass(frozen=True)
class FalseTm:
    """The boolean constant ``false``."""


@dataclass(frozen=True)
class Zero:
    """The numeral ``0``."""


@dataclass(frozen=True)
class Succ:
    """Successor of a number.

    Args:
        arg: Term expected to evaluate to a numeric value.
    """

    arg: Term

    def __post_init__(self) -> None:
        _check_children(self)


@dataclass(frozen=True)
class Pred:
    """Predecessor of a number; ``pred 0`` is ``0``.

    Args:
        arg: Term expected to evaluate to a numeric value.
    """

    arg: Term

    def __post_init__(self) -> None:
        _check_children(self)


@dataclass(frozen=True)
class IsZero:
    """Zero test.

    Args:
        arg: Term expected to evaluate to a numeric value.
    """

    arg: Term

    def __post_init__(self) -> None:
        _check_children(self)


@dataclass(frozen=True)
class If:
    """Conditional ``if cond then then else else_``.

    Args:
        cond: Term expected to evaluate to ``true`` or ``false``.
        then: Branch taken when ``cond`` is ``true``.
        else_: Branch taken when ``cond`` is ``false``.
    """

    cond: Term
    then: Term
    else_: Term

    def __post_init__(self) -> None:
        _check_children(self)


Term: TypeAlias = TrueTm | FalseTm | Zero | Succ | Pred | IsZero | If

TERM_TYPES = (TrueTm, FalseTm, Zero, Succ, Pred, IsZero, If)


def _check_children(node: Succ | Pred | IsZero | If) -> None:
    for field in fields(node):
        child = getattr(node, field.name)
        if not isinstance(child, TERM_TYPES):
            raise TypeError(
                f"{type(node).__name__}.{field.name} must be a term, got {child!r}"
            )


def children(term: Term) -> tuple[Term, ...]:
    """Return the immediate subterms of ``term`` in positional order."""

    match term:
        case TrueTm() | FalseTm() | Zero():
            return ()
        case Succ(t) | Pred(t) | IsZero(t):
            return (t,)
        case If(cond, then, else_):
            return (cond, then, else_)
    raise TypeError(f"Unexpected term: {term!r}")


def numeral(n: int) -> Term:
    """Build the numeric value for ``n`` as a chain of ``Succ`` over ``Zero``."""

    if n < 0:
        raise ValueError("Numerals must be non-negative")
    term: Term = Zero()
    for _ in range(n):
        term = Succ(term)
    return term


def to_int(term: Term) -> int | None:
    """Return the integer denoted by a numeric value, or ``None`` otherwise."""

    n = 0
    while isinstance(term, Succ):
        term = term.arg
        n += 1
    if isinstance(term, Zero):
        return n
    return None


__all__ = [
    "Term",
    "TERM_TYPES",
    "TrueTm",
    "FalseTm",
    "Zero",
    "Succ",
    "Pred",
    "IsZero",
    "If",
    "children",
    "numeral",
    "to_int",
]
