"""Complex number value type used to build rotation (twiddle) factors."""

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Complex:
    """Immutable complex number ``re + i*im``.

    All arithmetic returns new values.
    """

    re: float = 0.0
    im: float = 0.0

    def __add__(self, other: "Complex") -> "Complex":
        return Complex(self.re + other.re, self.im + other.im)

    def __sub__(self, other: "Complex") -> "Complex":
        return Complex(self.re - other.re, self.im - other.im)

    def __mul__(self, other: "Complex") -> "Complex":
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def __abs__(self) -> float:
        return self.abs()

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __str__(self) -> str:
        return f"({self.re},{self.im})"

    def abs(self) -> float:
        """Modulus, computed with hypot to avoid overflow."""
        return math.hypot(self.re, self.im)

    @staticmethod
    def add(a: "Complex", b: "Complex") -> "Complex":
        return a + b

    @staticmethod
    def sub(a: "Complex", b: "Complex") -> "Complex":
        return a - b

    @staticmethod
    def mult(a: "Complex", b: "Complex") -> "Complex":
        return a * b

    @staticmethod
    def cexp(z: "Complex") -> "Complex":
        """Complex exponential: e^(x+iy) = e^x * (cos y + i sin y)."""
        scale = math.exp(z.re)
        return Complex(scale * math.cos(z.im), scale * math.sin(z.im))

    @classmethod
    def from_complex(cls, value: complex) -> "Complex":
        return cls(float(value.real), float(value.imag))


def rotation_factors(count: int, length: int) -> np.ndarray:
    """
    Build twiddle factors e^(-i*2*pi*k/length) for k in [0, count).

    Args:
        count: Number of factors
        length: Transform length the factors rotate over

    Returns:
        complex128 array of size ``count``
    """
    step = -2.0 * math.pi / length
    return np.array(
        [complex(Complex.cexp(Complex(0.0, step * k))) for k in range(count)],
        dtype=np.complex128,
    )
