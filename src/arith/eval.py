"""Small-step and big-step evaluation of arith terms."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator

from .ast import FalseTm, If, IsZero, Pred, Succ, Term, TrueTm, Zero
from .predicates import is_numeric_val, is_val
from .pretty import pretty

logger = logging.getLogger(__name__)


class Strategy(Enum):
    SMALL_STEP = "small-step"
    BIG_STEP = "big-step"


def step(term: Term) -> Term:
    """Perform a single reduction step on ``term``.

    Returns ``term`` itself when no rule applies, which is the case for values
    and for stuck terms such as ``if 0 then true else false``.
    """

    match term:
        case If(TrueTm(), then, _):
            return then
        case If(FalseTm(), _, else_):
            return else_
        case If(cond, then, else_):
            cond1 = step(cond)
            if cond1 != cond:
                return If(cond1, then, else_)
            return term

        case Succ(arg):
            arg1 = step(arg)
            if arg1 != arg:
                return Succ(arg1)
            return term

        case Pred(Zero()):
            return Zero()
        case Pred(Succ(nv)) if is_numeric_val(nv):
            return nv
        case Pred(arg):
            arg1 = step(arg)
            if arg1 != arg:
                return Pred(arg1)
            return term

        case IsZero(Zero()):
            return TrueTm()
        case IsZero(Succ(nv)) if is_numeric_val(nv):
            return FalseTm()
        case IsZero(arg):
            arg1 = step(arg)
            if arg1 != arg:
                return IsZero(arg1)
            return term

        case TrueTm() | FalseTm() | Zero():
            return term

    raise TypeError(f"Unexpected term in step: {term!r}")


def reductions(term: Term) -> Iterator[Term]:
    """Yield ``term`` and every term reached from it by :func:`step`."""

    yield term
    while True:
        term1 = step(term)
        if term1 == term:
            return
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("step: %s -> %s", pretty(term), pretty(term1))
        term = term1
        yield term


def eval_small_step(term: Term) -> Term:
    """Reduce ``term`` with :func:`step` until no rule applies."""

    result = term
    for result in reductions(term):
        pass
    return result


def eval_big_step(term: Term) -> Term:
    """Evaluate ``term`` directly by structural recursion.

    Values evaluate to themselves. When the first subterm evaluates to
    something the operator cannot consume (a numeral as a condition, a
    boolean under ``succ``), evaluation is stuck and the node is returned with
    that subterm replaced by its value and any other subterms untouched.
    """

    if is_val(term):
        return term

    match term:
        case If(cond, then, else_):
            v1 = eval_big_step(cond)
            match v1:
                case TrueTm():
                    return eval_big_step(then)
                case FalseTm():
                    return eval_big_step(else_)
            result: Term = If(v1, then, else_)

        case Succ(arg):
            v1 = eval_big_step(arg)
            result = Succ(v1)
            if is_numeric_val(v1):
                return result

        case Pred(arg):
            v1 = eval_big_step(arg)
            match v1:
                case Zero():
                    return Zero()
                case Succ(nv) if is_numeric_val(nv):
                    return nv
            result = Pred(v1)

        case IsZero(arg):
            v1 = eval_big_step(arg)
            match v1:
                case Zero():
                    return TrueTm()
                case Succ(nv) if is_numeric_val(nv):
                    return FalseTm()
            result = IsZero(v1)

        case _:
            raise TypeError(f"Unexpected term in eval_big_step: {term!r}")

    logger.debug("stuck: %s", pretty(result))
    return result


def evaluate(term: Term, strategy: Strategy) -> Term:
    match strategy:
        case Strategy.SMALL_STEP:
            return eval_small_step(term)
        case Strategy.BIG_STEP:
            return eval_big_step(term)
    raise ValueError(f"Unknown strategy: {strategy!r}")


__all__ = [
    "Strategy",
    "step",
    "reductions",
    "eval_small_step",
    "eval_big_step",
    "evaluate",
]
