"""Structural value tests shared by both evaluators."""

from __future__ import annotations

from typing import TypeGuard

from .ast import FalseTm, Succ, Term, TrueTm, Zero


def is_numeric_val(term: Term) -> TypeGuard[Zero | Succ]:
    """Return ``True`` if *term* is ``0`` or a chain of ``succ`` ending in ``0``."""

    while isinstance(term, Succ):
        term = term.arg
    return isinstance(term, Zero)


def is_bool_val(term: Term) -> TypeGuard[TrueTm | FalseTm]:
    """Return ``True`` if *term* is ``true`` or ``false``."""

    return isinstance(term, (TrueTm, FalseTm))


def is_val(term: Term) -> bool:
    """Return ``True`` if *term* is a boolean or a numeric value."""

    return is_bool_val(term) or is_numeric_val(term)


__all__ = ["is_numeric_val", "is_bool_val", "is_val"]
