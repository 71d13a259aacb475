"""
Bridge between product-term covers and sympy boolean expressions.

Used to check that a minimized cover still denotes the same function as
its input, and to compute an exact sum of products (SOPform) to compare
the heuristic result against.
"""

from __future__ import annotations
from typing import Iterable, List, Sequence, Set

from sympy import And, Not, Or, Symbol, Xor
from sympy.logic.boolalg import Boolean, BooleanFalse, BooleanTrue, SOPform, to_dnf
from sympy.logic.inference import satisfiable

from ttmin.literal import Literal
from ttmin.product_term import ProductTerm


def term_to_sympy(term: ProductTerm) -> Boolean:
    """AND of the term's literals; don't-cares are dropped."""
    parts = []
    for name, value in term.literals().items():
        if value is Literal.TRUE:
            parts.append(Symbol(name))
        elif value is Literal.FALSE:
            parts.append(Not(Symbol(name)))
    return And(*parts)


def cover_to_sympy(terms: Iterable[ProductTerm]) -> Boolean:
    """OR of the terms; an empty cover is false."""
    return Or(*(term_to_sympy(term) for term in terms))


def equivalent(left: Iterable[ProductTerm], right: Iterable[ProductTerm]) -> bool:
    """True if both covers denote the same boolean function."""
    difference = Xor(cover_to_sympy(left), cover_to_sympy(right))
    return satisfiable(difference) is False


def cover_from_sympy(expr: Boolean, names: Sequence[str]) -> Set[ProductTerm]:
    """Convert a boolean expression into product terms over `names`.

    The expression is brought to DNF first; variables a conjunct does not
    mention become don't-cares.

    Raises:
        ValueError: if the expression mentions a variable outside `names`
    """
    expr = to_dnf(expr)
    if isinstance(expr, BooleanFalse):
        return set()
    if isinstance(expr, BooleanTrue):
        return {ProductTerm((name, Literal.DONT_CARE) for name in names)}

    conjuncts = expr.args if isinstance(expr, Or) else (expr,)
    cover: Set[ProductTerm] = set()
    for conjunct in conjuncts:
        factors = conjunct.args if isinstance(conjunct, And) else (conjunct,)
        values = {name: Literal.DONT_CARE for name in names}
        for factor in factors:
            if isinstance(factor, Not):
                name, value = factor.args[0].name, Literal.FALSE
            else:
                name, value = factor.name, Literal.TRUE
            if name not in values:
                raise ValueError(f"Variable {name!r} is not one of {list(names)}")
            values[name] = value
        cover.add(ProductTerm((name, values[name]) for name in names))
    return cover


def reference_cover(terms: Iterable[ProductTerm], names: Sequence[str]) -> Set[ProductTerm]:
    """Exact sum of products of a cover, computed by sympy's SOPform."""
    minterms: List[List[int]] = []
    seen = set()
    for term in terms:
        for minterm in term.min_terms(names):
            if minterm in seen:
                continue
            seen.add(minterm)
            minterms.append([1 if minterm[name] is Literal.TRUE else 0 for name in names])
    if not minterms:
        return set()
    sop = SOPform([Symbol(name) for name in names], minterms)
    return cover_from_sympy(sop, names)
