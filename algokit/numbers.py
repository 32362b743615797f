"""Elementary number routines: sequences, factorials, primes, arithmetic."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from math import isqrt
from typing import Callable, Sequence

_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


@dataclass(frozen=True)
class Complex:
    """A complex number with integer parts."""

    real: int = 0
    imaginary: int = 0

    def __add__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def __str__(self) -> str:
        return f"{self.real} + i{self.imaginary}"


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci terms, starting 0, 1."""
    terms = []
    current, following = 0, 1
    for _ in range(count):
        terms.append(current)
        current, following = following, current + following
    return terms


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values up to 1 are returned as given."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def factorial(n: int) -> int:
    """Return ``n!``; negative numbers have no factorial."""
    if n < 0:
        raise ValueError("factorial of a negative number doesn't exist")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to a non-negative integer ``exponent`` by repeated multiplication."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def is_leap_year(year: int) -> bool:
    """Tell whether ``year`` is a Gregorian leap year."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def reverse_digits(n: int) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def armstrong_numbers(limit: int = 500) -> list[int]:
    """Return numbers from 1 to ``limit`` equal to the sum of the cubes of their digits."""
    return [
        number
        for number in range(1, limit + 1)
        if sum(int(digit) ** 3 for digit in str(number)) == number
    ]


def is_prime(n: int) -> bool:
    """Tell whether ``n`` has exactly two divisors."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def karatsuba(x: int, y: int) -> int:
    """Multiply two integers with Karatsuba's divide-and-conquer method."""
    sign = -1 if (x < 0) != (y < 0) else 1
    x, y = abs(x), abs(y)
    if x < 10 or y < 10:
        return sign * x * y
    half = max(len(str(x)), len(str(y))) // 2
    shift = 10 ** half
    x_high, x_low = divmod(x, shift)
    y_high, y_low = divmod(y, shift)
    high = karatsuba(x_high, y_high)
    low = karatsuba(x_low, y_low)
    cross = high + low - karatsuba(x_high - x_low, y_high - y_low)
    return sign * (high * shift * shift + cross * shift + low)


def calculate(op: str, a: float, b: float) -> float:
    """Apply one of ``+ - * /`` to two operands."""
    try:
        operation = _OPERATIONS[op]
    except KeyError:
        raise ValueError(f"operator is not correct: {op!r}") from None
    return operation(a, b)


def determinant(matrix: Sequence[Sequence[int]]) -> int:
    """Return the determinant of a square matrix by cofactor expansion."""
    rows = [list(row) for row in matrix]
    if not rows or any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square and non-empty")
    return _determinant(rows)


def _determinant(rows: list[list[int]]) -> int:
    if len(rows) == 1:
        return rows[0][0]
    if len(rows) == 2:
        return rows[0][0] * rows[1][1] - rows[1][0] * rows[0][1]
    return sum(
        (-1) ** column * value * _determinant([row[:column] + row[column + 1:] for row in rows[1:]])
        for column, value in enumerate(rows[0])
    )