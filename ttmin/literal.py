"""
Tri-state literal values used inside product terms.
"""

from __future__ import annotations
from enum import Enum


class Literal(Enum):
    """Value a variable takes inside a product term."""
    FALSE = 0
    TRUE = 1
    DONT_CARE = 2

    @property
    def symbol(self) -> str:
        """Cube character for this value ('0', '1' or '-')."""
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Literal':
        for literal, char in _SYMBOLS.items():
            if char == symbol:
                return literal
        raise ValueError(f"Unknown cube character {symbol!r} (expected '0', '1' or '-')")

    def is_concrete(self) -> bool:
        return self is not Literal.DONT_CARE


_SYMBOLS = {
    Literal.FALSE: '0',
    Literal.TRUE: '1',
    Literal.DONT_CARE: '-',
}
