"""
Scratch node of the ternary (FALSE / DONT_CARE / TRUE) decision tree.

The tree is never linked together: each level is a flat frontier list
of nodes, replaced wholesale when the next variable is consumed.
"""

from __future__ import annotations
from typing import Optional

from ttmin.product_term import ProductTerm


class TernaryNode:
    """A frontier node: the next variable to branch on plus the path so far.

    The attached term records the literals chosen on the way down from
    the root. The root carries no term.
    """

    def __init__(self, variable: Optional[str] = None, term: Optional[ProductTerm] = None):
        """Initialize a ternary node.

        Args:
            variable: Variable this node branches on (None if untagged)
            term: Partial product term leading to this node (None at the root)
        """
        self.variable = variable
        self.term = term

    @classmethod
    def with_term(cls, term: ProductTerm) -> 'TernaryNode':
        return cls(term=term)

    def path(self) -> ProductTerm:
        """Copy of the attached term, or an empty term at the root."""
        if self.term is None:
            return ProductTerm.empty()
        return self.term.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TernaryNode):
            return NotImplemented
        return self.term == other.term

    def __hash__(self) -> int:
        return hash(self.term)

    def __repr__(self) -> str:
        return f"TernaryNode(variable={self.variable!r}, term={self.term!r})"
