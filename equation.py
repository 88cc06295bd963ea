"""
Interpolation Lab - Equation Rendering

Symbolic description of an interpolating polynomial as an ordered list of
signed terms. Both interpolators build their equations from these types
and share ``render_signed_terms`` for the sign and precision rules:

- the leading term carries no "+" (only a "-" when negative),
- later terms are joined with " + " or " - " by the sign of the coefficient,
- coefficient magnitudes are printed with fixed decimals (2 by default).

Text output uses implicit multiplication for Newton-Gregory terms, e.g.
``f(x) = 0.00 + 1.00(u) / 1 + 2.00(u)(u - 1) / 2``. LaTeX output is meant
for ``st.latex``; escaping beyond that is left to the caller.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import sympy as sp

from config import EQUATION_PRECISION


def _sympy_number(value):
    value = float(value)
    if value.is_integer():
        return sp.Integer(int(value))
    return sp.Float(value)


@dataclass(frozen=True)
class Factor:
    """
    ``(variable - shift)``, optionally divided by ``(a - b)``.

    ``precision=None`` prints numbers in their shortest form (used for the
    integer offsets of Newton-Gregory); otherwise fixed decimals.
    """
    variable: str
    shift: float = 0.0
    denominator: Optional[Tuple[float, float]] = None
    precision: Optional[int] = None

    def _fmt(self, value):
        if self.precision is None:
            return f"{value:g}"
        return f"{value:.{self.precision}f}"

    def _difference(self, head, value):
        if value == 0 and self.precision is None:
            return head
        if value < 0:
            return f"{head} + {self._fmt(-value)}"
        return f"{head} - {self._fmt(value)}"

    def text(self):
        numerator = f"({self._difference(self.variable, self.shift)})"
        if self.denominator is None:
            return numerator
        a, b = self.denominator
        return f"({numerator} / ({self._difference(self._fmt(a), b)}))"

    def latex(self):
        numerator = self._difference(self.variable, self.shift)
        if self.denominator is None:
            return rf"\left({numerator}\right)"
        a, b = self.denominator
        return rf"\frac{{{numerator}}}{{{self._difference(self._fmt(a), b)}}}"

    def evaluate(self, value):
        result = value - self.shift
        if self.denominator is not None:
            a, b = self.denominator
            result = result / (a - b)
        return result

    def to_sympy(self, symbol):
        expr = symbol - _sympy_number(self.shift)
        if self.denominator is not None:
            a, b = self.denominator
            expr = expr / (_sympy_number(a) - _sympy_number(b))
        return expr


@dataclass(frozen=True)
class Term:
    """Signed coefficient times a product of factors, over an optional divisor."""
    coefficient: float
    factors: Tuple[Factor, ...] = ()
    divisor: Optional[int] = None
    joiner: str = ''

    def text(self, precision=EQUATION_PRECISION):
        """Unsigned text of the term; the sign is added by the renderer."""
        body = f"{abs(self.coefficient):.{precision}f}"
        if self.factors:
            body += self.joiner + self.joiner.join(f.text() for f in self.factors)
        if self.divisor is not None:
            body += f" / {self.divisor}"
        return body

    def latex(self, precision=EQUATION_PRECISION):
        joiner = r" \cdot " if self.joiner.strip() else ""
        body = f"{abs(self.coefficient):.{precision}f}"
        if self.factors:
            body += joiner + joiner.join(f.latex() for f in self.factors)
        if self.divisor is not None:
            body = rf"\frac{{{body}}}{{{self.divisor}}}"
        return body

    def value(self, at):
        result = self.coefficient
        for factor in self.factors:
            result *= factor.evaluate(at)
        if self.divisor is not None:
            result /= self.divisor
        return result

    def to_sympy(self, symbol):
        expr = sp.Float(self.coefficient)
        for factor in self.factors:
            expr = expr * factor.to_sympy(symbol)
        if self.divisor is not None:
            expr = expr / self.divisor
        return expr


def render_signed_terms(terms, precision=EQUATION_PRECISION, style='text'):
    """
    Join ``terms`` into one polynomial string.

    ``style`` is ``'text'`` or ``'latex'``.
    """
    if style not in ('text', 'latex'):
        raise ValueError(f"Unknown equation style: {style}")

    parts = []
    for index, term in enumerate(terms):
        body = term.latex(precision) if style == 'latex' else term.text(precision)
        negative = term.coefficient < 0
        if index == 0:
            parts.append(f"-{body}" if negative else body)
        else:
            parts.append(f" {'-' if negative else '+'} {body}")

    return "".join(parts) if parts else f"{0:.{precision}f}"


@dataclass(frozen=True)
class Equation:
    """
    Interpolating polynomial in ``variable``.

    When ``variable`` is not ``x`` it is the normalized coordinate
    ``(x - origin) / step``.
    """
    terms: Tuple[Term, ...]
    variable: str = 'x'
    origin: float = 0.0
    step: float = 1.0
    lhs: str = 'f(x)'
    precision: int = EQUATION_PRECISION

    def text(self, precision=None):
        precision = self.precision if precision is None else precision
        return f"{self.lhs} = {render_signed_terms(self.terms, precision)}"

    def latex(self, precision=None):
        precision = self.precision if precision is None else precision
        return f"{self.lhs} = {render_signed_terms(self.terms, precision, style='latex')}"

    def __str__(self):
        return self.text()

    @property
    def normalized(self):
        return self.variable != 'x'

    def substitution(self):
        """Explanation of the normalized variable, empty for plain x."""
        if not self.normalized:
            return ""
        return f"{self.variable} = (x - {self.origin:g}) / {self.step:g}"

    def normalize(self, x):
        if not self.normalized:
            return x
        return (x - self.origin) / self.step

    def evaluate(self, x):
        """Value of the unrounded polynomial at abscissa ``x``."""
        at = self.normalize(x)
        return sum(term.value(at) for term in self.terms)

    def to_sympy(self):
        """Polynomial as a sympy expression in ``x``."""
        x = sp.Symbol('x')
        var = sp.Symbol(self.variable)
        expr = sp.Add(*(term.to_sympy(var) for term in self.terms))
        if self.normalized:
            expr = expr.subs(var, (x - _sympy_number(self.origin)) / _sympy_number(self.step))
        return expr

    def expanded(self):
        return sp.expand(self.to_sympy())

    def to_function(self):
        """Numpy-vectorised callable of the polynomial."""
        x = sp.Symbol('x')
        func = sp.lambdify(x, self.expanded(), modules=['numpy'])

        def evaluate(values):
            values = np.asarray(values, dtype=float)
            return np.broadcast_to(np.asarray(func(values), dtype=float), values.shape).copy()

        return evaluate
