"""
Precondition violations raised before a cost matrix reaches the solver.
"""

from __future__ import annotations

__all__ = ["InvalidCostMatrix", "DimensionMismatch", "NonFiniteValue"]


class InvalidCostMatrix(ValueError):
    """
    Base class for cost matrices that cannot be solved.
    """


class DimensionMismatch(InvalidCostMatrix):
    """
    The number of entries does not agree with the stated shape.
    """


class NonFiniteValue(InvalidCostMatrix):
    """
    An entry is NaN or infinite.
    """

    def __init__(self, index: int, value: float):
        self.index = index
        self.value = value

        super().__init__(f"Cost matrix entry {index} is not finite: {value}")
