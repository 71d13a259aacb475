"""
Product terms: conjunctions of literals over named variables.

A product term maps each variable name to a Literal. Unlike a min term
it may hold don't-care literals, so every min term is a product term but
not every product term is a min term.

    f(A, B, C) = ~A&B | A&B&C

has the product terms {A: FALSE, B: TRUE, C: DONT_CARE} and
{A: TRUE, B: TRUE, C: TRUE}.

Insertion order is kept for rendering only. Equality and hashing ignore
it, so two terms built in different orders are interchangeable inside
sets and dictionaries.
"""

from __future__ import annotations
from itertools import product
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from ttmin.errors import FailureReason, MergeError
from ttmin.literal import Literal


class ProductTerm:
    """Ordered mapping from variable name to Literal."""

    __slots__ = ('_literals',)

    def __init__(self, literals: Optional[Iterable[Tuple[str, Literal]]] = None):
        self._literals: Dict[str, Literal] = {}
        if literals is not None:
            for name, value in literals:
                self._literals[name] = value

    # ---- Construction ----

    @classmethod
    def empty(cls) -> 'ProductTerm':
        """Term with no variables (renders as the empty string)."""
        return cls()

    @classmethod
    def with_literals(cls, pairs: Iterable[Tuple[str, Literal]]) -> 'ProductTerm':
        """Build a term from (variable, literal) pairs.

        Later duplicates overwrite earlier ones for the same variable but
        keep the position of its first occurrence.
        """
        return cls(pairs)

    @classmethod
    def from_cube(cls, cube: str, names: Sequence[str]) -> 'ProductTerm':
        """Build a term from a positional cube such as '01-'.

        Args:
            cube: One character per variable: '0', '1' or '-'
            names: Variable names, in cube position order

        Returns:
            ProductTerm over all of `names`
        """
        if len(cube) != len(names):
            raise ValueError(f"Cube {cube!r} has {len(cube)} positions for {len(names)} variables")
        return cls((name, Literal.from_symbol(c)) for name, c in zip(names, cube))

    @classmethod
    def from_minterm(cls, index: int, names: Sequence[str]) -> 'ProductTerm':
        """Build the min term with the given index; names[0] is the MSB."""
        n = len(names)
        if not 0 <= index < 2 ** n:
            raise ValueError(f"Minterm {index} out of range for {n} variables")
        return cls(
            (name, Literal.TRUE if (index >> (n - 1 - i)) & 1 else Literal.FALSE)
            for i, name in enumerate(names)
        )

    def copy(self) -> 'ProductTerm':
        return ProductTerm(self._literals.items())

    # ---- Mutation (append / undo stack) ----

    def add_literal(self, name: str, value: Literal) -> None:
        """Insert a new variable at the end, or overwrite an existing one in place."""
        self._literals[name] = value

    def remove_last(self) -> Literal:
        """Remove the most recently appended variable and return its literal.

        Raises:
            IndexError: if the term is empty
        """
        if not self._literals:
            raise IndexError("remove_last() on an empty product term")
        _, value = self._literals.popitem()
        return value

    # ---- Accessors ----

    def literals(self) -> Dict[str, Literal]:
        """Order-preserving snapshot of variable -> literal."""
        return dict(self._literals)

    def variables(self) -> List[str]:
        return list(self._literals)

    def is_empty(self) -> bool:
        return not self._literals

    def is_min_term(self) -> bool:
        """True if no literal is a don't-care."""
        return all(value.is_concrete() for value in self._literals.values())

    def __len__(self) -> int:
        return len(self._literals)

    def __contains__(self, name: object) -> bool:
        return name in self._literals

    def __getitem__(self, name: str) -> Literal:
        return self._literals[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._literals)

    # ---- Merge rule ----

    def merge(self, other: 'ProductTerm') -> 'ProductTerm':
        """Combine two terms over the same variables into one.

        Values shared by both sides are carried over. A variable that is
        concrete on both sides but differs becomes a don't-care; at most
        one such variable is allowed. A don't-care facing a concrete
        value is never merged.

        Returns:
            The merged term, in the variable order of `self`

        Raises:
            MergeError: carrying the FailureReason of the rejection
        """
        if len(self._literals) != len(other._literals):
            raise MergeError(
                FailureReason.SIZE_MISMATCH,
                f"Cannot merge {self} and {other}: {len(self)} vs {len(other)} variables",
            )
        for name in self._literals:
            if name not in other._literals:
                raise MergeError(
                    FailureReason.VARIABLE_MISMATCH,
                    f"Cannot merge {self} and {other}: {name!r} missing on one side",
                )

        merged = ProductTerm()
        differing = 0
        for name, value in self._literals.items():
            other_value = other._literals[name]
            if value == other_value:
                merged.add_literal(name, value)
            elif not value.is_concrete() or not other_value.is_concrete():
                raise MergeError(
                    FailureReason.DONT_CARE_MISMATCH,
                    f"Cannot merge {self} and {other}: don't-care mismatch on {name!r}",
                )
            else:
                differing += 1
                if differing > 1:
                    raise MergeError(
                        FailureReason.MULTIPLE_DIFFERENCES,
                        f"Cannot merge {self} and {other}: more than one variable differs",
                    )
                merged.add_literal(name, Literal.DONT_CARE)
        return merged

    # ---- Predicates ----

    def is_prefix_of(self, other: 'ProductTerm') -> bool:
        """True if every variable of self appears in other with the identical literal."""
        theirs = other._literals
        for name, value in self._literals.items():
            if theirs.get(name) != value:
                return False
        return True

    def is_prefix_of_any(self, terms: Iterable['ProductTerm']) -> bool:
        return any(self.is_prefix_of(term) for term in terms)

    def matches(self, other: 'ProductTerm') -> bool:
        """Exact structural match: a prefix with the same number of variables."""
        return len(self._literals) == len(other._literals) and self.is_prefix_of(other)

    def matches_any(self, terms: Iterable['ProductTerm']) -> bool:
        return any(self.matches(term) for term in terms)

    def covers(self, other: 'ProductTerm') -> bool:
        """True if self absorbs other (self >= other).

        Every variable of self must appear in other and be either a
        don't-care in self or carry the same value in both.
        """
        theirs = other._literals
        for name, value in self._literals.items():
            if name not in theirs:
                return False
            if value is not Literal.DONT_CARE and theirs[name] != value:
                return False
        return True

    def min_terms(self, names: Optional[Sequence[str]] = None) -> List['ProductTerm']:
        """Enumerate the min terms covered by this term.

        Args:
            names: Variable order of the results; defaults to insertion order
        """
        order = list(names) if names is not None else list(self._literals)
        slots = []
        for name in order:
            value = self._literals[name]
            if value is Literal.DONT_CARE:
                slots.append((Literal.FALSE, Literal.TRUE))
            else:
                slots.append((value,))
        return [ProductTerm(zip(order, values)) for values in product(*slots)]

    # ---- Rendering ----

    def to_expression(self) -> str:
        """Render as '~A&B'; don't-cares are omitted."""
        parts = []
        for name, value in self._literals.items():
            if value is Literal.FALSE:
                parts.append('~' + name)
            elif value is Literal.TRUE:
                parts.append(name)
        return '&'.join(parts)

    def to_cube(self, names: Sequence[str]) -> str:
        """Render as a positional cube over `names`, e.g. '01-'."""
        return ''.join(self._literals[name].symbol for name in names)

    def __str__(self) -> str:
        return f"({self.to_expression()})"

    def __repr__(self) -> str:
        body = ', '.join(f"{name}={value.symbol}" for name, value in self._literals.items())
        return f"ProductTerm({body})"

    # ---- Value semantics ----

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductTerm):
            return NotImplemented
        return self._literals == other._literals

    def __hash__(self) -> int:
        return hash(frozenset(self._literals.items()))
