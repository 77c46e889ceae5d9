"""
Polynomials over GF(2^8).

Split builds one random polynomial per secret byte and evaluates it at
every share's x-coordinate. Combine never rebuilds the polynomial; it
interpolates the constant term straight from the samples.
"""

from typing import List, Sequence

from . import field
from .rng import random_bytes
from .secret import wipe


class Polynomial:
    """c_0 + c_1*x + ... + c_d*x^d, coefficients stored lowest degree first."""

    __slots__ = ('coefficients',)

    def __init__(self, coefficients):
        self.coefficients = bytearray(coefficients)
        if not self.coefficients:
            raise ValueError("A polynomial needs at least one coefficient")

    @classmethod
    def generate(cls, intercept: int, degree: int, rng=None) -> 'Polynomial':
        """
        Random polynomial of the given degree with constant term `intercept`.

        c_1..c_degree are drawn uniformly from the whole byte range, so the
        leading coefficient may be zero. Restricting it would skew the
        distribution of the shares.
        """
        if degree < 0:
            raise ValueError(f"Degree must be >= 0, got {degree}")
        drawn = random_bytes(degree, rng)
        try:
            coefficients = bytearray([intercept]) + drawn
        finally:
            wipe(drawn)
        poly = cls.__new__(cls)
        poly.coefficients = coefficients
        return poly

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def __len__(self) -> int:
        return len(self.coefficients)

    def __repr__(self) -> str:
        return f"Polynomial(<degree {self.degree}>)"

    def evaluate(self, x: int) -> int:
        """Evaluate at `x` with Horner's method."""
        if x == 0:
            return self.coefficients[0]
        result = 0
        for coeff in reversed(self.coefficients):
            result = field.add(field.mul(result, x), coeff)
        return result

    def wipe(self) -> None:
        """Zero the coefficients in place."""
        wipe(self.coefficients)

    @staticmethod
    def lagrange_weights(xs: Sequence[int], x: int) -> List[int]:
        """
        Lagrange basis values L_i(x) for the sample points `xs`.

        They depend only on the public x-coordinates, so a caller
        interpolating many columns over the same points computes them once
        and then needs only one `field.mul` per sample.

        Raises:
            ValueError: If xs is empty, repeats a value or contains 0.
        """
        if not xs:
            raise ValueError("Cannot interpolate from zero points")
        if 0 in xs or len(set(xs)) != len(xs):
            raise ValueError("x-coordinates must be non-zero and distinct")

        weights = []
        for i, xi in enumerate(xs):
            numerator = 1
            denominator = 1
            for j, xj in enumerate(xs):
                if i == j:
                    continue
                numerator = field.mul(numerator, field.sub(x, xj))
                denominator = field.mul(denominator, field.sub(xi, xj))
            weights.append(field.div(numerator, denominator))
        return weights

    @staticmethod
    def combine_weighted(weights: Sequence[int], ys: Sequence[int]) -> int:
        """Sum of weights[i] * ys[i]; the y-values only meet `field.mul` and XOR."""
        result = 0
        for weight, y in zip(weights, ys):
            result = field.add(result, field.mul(weight, y))
        return result

    @staticmethod
    def interpolate(xs: Sequence[int], ys: Sequence[int], x: int) -> int:
        """
        Lagrange interpolation: value at `x` of the unique polynomial of
        degree < len(xs) through the points (xs[i], ys[i]).

        The x-coordinates are public; only the y-values are secret and they
        are touched solely by `field.mul` and XOR.

        Raises:
            ValueError: If the inputs are empty, differ in length, or xs
                repeats a value or contains 0.
        """
        if len(xs) != len(ys):
            raise ValueError(f"Got {len(xs)} x-coordinates but {len(ys)} y-coordinates")
        weights = Polynomial.lagrange_weights(xs, x)
        return Polynomial.combine_weighted(weights, ys)
