"""
Interpolation Lab - Result Type
"""

from dataclasses import dataclass

from equation import Equation


@dataclass(frozen=True)
class InterpolationResult:
    """
    Outcome of one evaluation.

    ``equation`` is the plain-text rendering of ``formula``; use
    ``formula.latex()`` for math markup.
    """
    estimate: float
    equation: str
    formula: Equation
    method: str

    def formatted(self, decimals=4):
        return f"{self.estimate:.{decimals}f}"
