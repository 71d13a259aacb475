"""
Recoverable failures raised while merging terms or building trees.
"""

from __future__ import annotations
from enum import Enum


class FailureReason(Enum):
    """Why a merge or a tree build was rejected."""
    SIZE_MISMATCH = "size mismatch"
    VARIABLE_MISMATCH = "variable mismatch"
    MULTIPLE_DIFFERENCES = "multiple differing variables"
    DONT_CARE_MISMATCH = "don't-care mismatch"
    TOO_FEW_VARIABLES = "too few variables"


class MinimizationError(ValueError):
    """Base class for the recoverable conditions of the minimizer."""

    def __init__(self, reason: FailureReason, message: str = ""):
        self.reason = reason
        super().__init__(message or reason.value)


class MergeError(MinimizationError):
    """Two product terms cannot be combined into one."""


class TooFewVariablesError(MinimizationError):
    """A variable order is too short to build a ternary tree from."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            FailureReason.TOO_FEW_VARIABLES,
            f"Too few variables to build tree: need at least 2, got {count}",
        )
