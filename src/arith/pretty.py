"""Rendering of arith terms as box-drawing trees and as concrete syntax."""

from __future__ import annotations

from .ast import FalseTm, If, IsZero, Pred, Succ, Term, TrueTm, Zero, children


def label(term: Term) -> str:
    """Return the keyword that names ``term``'s variant."""

    match term:
        case TrueTm():
            return "true"
        case FalseTm():
            return "false"
        case Zero():
            return "0"
        case Succ():
            return "succ"
        case Pred():
            return "pred"
        case IsZero():
            return "iszero"
        case If():
            return "if"
    raise TypeError(f"Unexpected term: {term!r}")


def render_tree(term: Term) -> str:
    """Render ``term`` as an indented tree, one node per line.

    >>> print(render_tree(If(TrueTm(), Zero(), Succ(Zero()))), end="")
    if
    ├─true
    ├─0
    └─succ
      └─0
    """

    lines = [label(term)]

    def walk(subterms: tuple[Term, ...], indent: str) -> None:
        for i, child in enumerate(subterms):
            if i == len(subterms) - 1:
                lines.append(f"{indent}└─{label(child)}")
                walk(children(child), indent + "  ")
            else:
                lines.append(f"{indent}├─{label(child)}")
                walk(children(child), indent + "│ ")

    walk(children(term), "")
    return "\n".join(lines) + "\n"


def pretty(term: Term) -> str:
    """Return ``term`` in the concrete syntax accepted by the parser."""

    match term:
        case If(cond, then, else_):
            return f"if {pretty(cond)} then {pretty(then)} else {pretty(else_)}"
        case Succ(t) | Pred(t) | IsZero(t):
            return f"{label(term)} {pretty(t)}"
        case _:
            return label(term)


__all__ = ["label", "render_tree", "pretty"]
