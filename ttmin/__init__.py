"""
TT-Min: ternary tree minimization of boolean functions in DNF.

This package reduces a set of product terms (conjunctions of literals
that may contain don't-cares) to a smaller or equal set covering the
same assignments.
"""

from ttmin.errors import FailureReason, MergeError, MinimizationError, TooFewVariablesError
from ttmin.literal import Literal
from ttmin.minimizer import TernaryTreeMinimizer, minimize
from ttmin.product_term import ProductTerm
from ttmin.ternary_node import TernaryNode

__all__ = [
    'FailureReason',
    'Literal',
    'MergeError',
    'MinimizationError',
    'ProductTerm',
    'TernaryNode',
    'TernaryTreeMinimizer',
    'TooFewVariablesError',
    'minimize',
]
