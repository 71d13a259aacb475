"""
Ternary tree minimization (TT-Min) of a sum of product terms.

Each round roots a ternary decision tree over all but the last variable
of the current order, pruning every branch that is not a prefix of some
term in the working set. The leaves are then tested against the working
set on the remaining variable (the merge axis): a don't-care match is
kept as is, and a FALSE/TRUE sibling pair is merged into a single term
carrying a don't-care on the axis.

After a successful round the order is rotated left, so the axis moves
on and every variable serves as the merge axis once per cycle. The
minimizer runs len(order) + 1 rounds:

    working = terms
    repeat len(order) + 1 times:
        working = build_and_merge(working, order)   # skipped on failure
        order = rotate_left(order)                  # only on success

The result covers exactly the same assignments as the input. It is a
heuristic: the result is never larger than the input but is not
guaranteed to be a minimum cover.
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Sequence, Set

from ttmin.errors import MergeError, TooFewVariablesError
from ttmin.literal import Literal
from ttmin.product_term import ProductTerm
from ttmin.ternary_node import TernaryNode

logger = logging.getLogger(__name__)

# Order in which children are produced at each level
_BRANCHES = (Literal.FALSE, Literal.DONT_CARE, Literal.TRUE)


class TernaryTreeMinimizer:
    """Drives the build / merge / rotate rounds over a working set."""

    def __init__(self, *, exhaustive_merge: bool = False):
        """Initialize the minimizer.

        Args:
            exhaustive_merge: Also test the FALSE/TRUE siblings of a leaf
                whose don't-care extension already matched. Keeps terms
                that the don't-care term absorbs, which can enable merges
                on later axes.
        """
        self.exhaustive_merge = exhaustive_merge

    def apply(self, terms: Iterable[ProductTerm], variable_order: Sequence[str]) -> Set[ProductTerm]:
        """Minimize a set of product terms.

        Args:
            terms: Product terms over the variables of `variable_order`
            variable_order: Initial variable order; not modified

        Returns:
            New set of product terms covering the same assignments
        """
        working: Set[ProductTerm] = {term.copy() for term in terms}
        order = list(variable_order)
        rounds = len(order) + 1

        for round_no in range(1, rounds + 1):
            try:
                merged = self.build_and_merge(working, order)
            except TooFewVariablesError as exc:
                logger.debug("Round %d/%d skipped: %s", round_no, rounds, exc)
                continue
            logger.debug(
                "Round %d/%d order=%s: %d -> %d terms",
                round_no, rounds, order, len(working), len(merged),
            )
            working = merged
            order = self.rotate_left(order)

        return working

    def build_and_merge(self, terms: Set[ProductTerm], order: Sequence[str]) -> Set[ProductTerm]:
        """Run one round: build the pruned tree, then merge on the last variable.

        Raises:
            TooFewVariablesError: if `order` has fewer than 2 variables
        """
        if len(order) < 2:
            raise TooFewVariablesError(len(order))

        root = TernaryNode(variable=order[0])
        leaves = self._build(root, order, terms)
        return self._merge(leaves, terms, order[-1])

    @staticmethod
    def rotate_left(order: Sequence[str]) -> List[str]:
        """Return a new order with the first variable moved to the end."""
        rotated = list(order)
        if rotated:
            rotated.append(rotated.pop(0))
        return rotated

    def _build(self, root: TernaryNode, order: Sequence[str], terms: Set[ProductTerm]) -> List[TernaryNode]:
        """Expand the frontier level by level over order[:-1].

        A child survives only if its partial term is a prefix of some term,
        so the frontier never grows past the number of distinct prefixes.
        """
        nodes = [root]
        for level, variable in enumerate(order[:-1]):
            next_variable = order[level + 1]
            children: List[TernaryNode] = []
            for node in nodes:
                path = node.path()
                for value in _BRANCHES:
                    path.add_literal(variable, value)
                    if path.is_prefix_of_any(terms):
                        children.append(TernaryNode(next_variable, path.copy()))
                    path.remove_last()
            nodes = children
            logger.debug("Level %s: frontier width %d", variable, len(nodes))
        return nodes

    def _merge(self, leaves: List[TernaryNode], terms: Set[ProductTerm], axis: str) -> Set[ProductTerm]:
        result: Set[ProductTerm] = set()
        for leaf in leaves:
            path = leaf.path()

            dont_care = self._extend_if_present(path, terms, axis, Literal.DONT_CARE)
            if dont_care is not None:
                result.add(dont_care)
                if not self.exhaustive_merge:
                    continue

            false_term = self._extend_if_present(path, terms, axis, Literal.FALSE)
            true_term = self._extend_if_present(path, terms, axis, Literal.TRUE)

            if false_term is not None and true_term is not None:
                try:
                    result.add(false_term.merge(true_term))
                except MergeError as exc:
                    # siblings differ in don't-care status elsewhere
                    logger.debug("Keeping %s and %s unmerged: %s", false_term, true_term, exc.reason.value)
                    result.add(false_term)
                    result.add(true_term)
            elif false_term is not None:
                result.add(false_term)
            elif true_term is not None:
                result.add(true_term)
        return result

    @staticmethod
    def _extend_if_present(
        path: ProductTerm,
        terms: Set[ProductTerm],
        variable: str,
        value: Literal,
    ) -> Optional[ProductTerm]:
        """Return path + {variable: value} if it is exactly one of `terms`."""
        path.add_literal(variable, value)
        try:
            if path.matches_any(terms):
                return path.copy()
            return None
        finally:
            path.remove_last()


def minimize(
    terms: Iterable[ProductTerm],
    variable_order: Sequence[str],
    *,
    exhaustive_merge: bool = False,
) -> Set[ProductTerm]:
    """Minimize `terms` with a fresh TernaryTreeMinimizer."""
    return TernaryTreeMinimizer(exhaustive_merge=exhaustive_merge).apply(terms, variable_order)


def example_usage():
    """Example: f = ~A&B | A&~B | ~A&~B."""
    names = ["A", "B"]
    terms = {ProductTerm.from_cube(cube, names) for cube in ("01", "10", "00")}

    print("Input:")
    for term in sorted(terms, key=lambda t: t.to_cube(names)):
        print(f"  {term.to_cube(names)}  {term.to_expression()}")

    result = minimize(terms, names)

    print("Minimized:")
    for term in sorted(result, key=lambda t: t.to_cube(names)):
        print(f"  {term.to_cube(names)}  {term.to_expression()}")


if __name__ == "__main__":
    example_usage()
