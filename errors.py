"""
Interpolation Lab - Error Types

Every failure the interpolation core can raise. All of them derive from
``InterpolationError`` (itself a ``ValueError``) so the UI can catch the
whole family at once.
"""


class InterpolationError(ValueError):
    """Base class for interpolation failures."""


class InsufficientDataError(InterpolationError):
    """Fewer than two sample points were supplied."""

    def __init__(self, count, minimum=2):
        self.count = count
        self.minimum = minimum
        super().__init__(
            f"Interpolation needs at least {minimum} points, got {count}"
        )


class InvalidQueryError(InterpolationError):
    """The query abscissa is not a finite number."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Not a valid interpolation point: {value!r}")


class InvalidPointError(InterpolationError):
    """A sample coordinate is missing, non-numeric or not finite."""

    def __init__(self, index, field, value):
        self.index = index
        self.field = field
        self.value = value
        super().__init__(f"Point {index}: {field} = {value!r} is not a finite number")


class DegenerateSpacingError(InterpolationError):
    """Newton-Gregory step h = x[1] - x[0] is zero."""

    def __init__(self, x0):
        self.x0 = x0
        super().__init__(
            f"First two x-values are equal ({x0}); step size h is zero"
        )


class NonUniformSpacingError(InterpolationError):
    """Newton-Gregory points are not equally spaced."""

    def __init__(self, index, step, expected):
        self.index = index
        self.step = step
        self.expected = expected
        super().__init__(
            f"x-values are not equally spaced: step {index} -> {index + 1} "
            f"is {step:g}, expected h = {expected:g}"
        )


class DuplicateAbscissaError(InterpolationError):
    """Two Lagrange sample points share the same x."""

    def __init__(self, i, j, x):
        self.i = i
        self.j = j
        self.x = x
        super().__init__(f"Points {i} and {j} share the same x-value ({x})")
