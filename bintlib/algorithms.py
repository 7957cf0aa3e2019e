"""Number-theoretic algorithms on BigInt values.

Covers the greatest common divisor, modular inverses, Montgomery reduction
and several exponentiation strategies.
"""

from __future__ import annotations

from typing import Iterator

from bintlib.bigint import BigInt, karatsuba_square

_ZERO = BigInt()
_ONE = BigInt(1)


def _degree_bits(degree: BigInt) -> list[int]:
    """Return the bits of ``degree``'s magnitude, lowest first, without high zeros."""
    bits = [(chunk >> i) & 1 for chunk in degree.chunks for i in range(32)]
    while bits and bits[-1] == 0:
        bits.pop()
    return bits


def _windows(degree: BigInt, width: int) -> Iterator[int]:
    """Yield ``width``-bit windows of ``degree``, most significant first."""
    bits = _degree_bits(degree)
    bits.extend([0] * (-len(bits) % width))
    for start in range(len(bits) - width, -1, -width):
        yield sum(bit << k for k, bit in enumerate(bits[start:start + width]))


def _window_width(base: int) -> int:
    """Validate a window base and return how many bits each window holds."""
    if base <= 0 or base & (base - 1):
        raise ValueError("Base is not a power of 2")
    if base == 1:
        raise ValueError("Base cannot be equal to 1")
    return base.bit_length() - 1


def _check_degree(degree: BigInt) -> None:
    if degree < _ZERO:
        raise ValueError("Raising to a negative power")


def gcd(lhs: BigInt, rhs: BigInt) -> BigInt:
    """Greatest common divisor by Euclid's algorithm."""
    while rhs != _ZERO:
        lhs, rhs = rhs, lhs % rhs
    return lhs


def extended_gcd(lhs: BigInt, rhs: BigInt) -> tuple[BigInt, BigInt, BigInt]:
    """Return ``(g, x, y)`` with ``g = gcd(|lhs|, |rhs|)`` and ``lhs*x + rhs*y = g``."""
    a, b = abs(lhs), abs(rhs)
    x0, y0 = _ONE, _ZERO
    x1, y1 = _ZERO, _ONE
    while b != _ZERO:
        q = a // b
        r = a % b
        a, b = b, r
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    if lhs.is_negative:
        x0 = -x0
    if rhs.is_negative:
        y0 = -y0
    return a, x0, y0


def mod_inverse(a: BigInt, m: BigInt) -> BigInt:
    """Return the inverse of ``a`` modulo ``m``.

    Raises ValueError when ``a`` and ``m`` are not coprime.
    """
    if a > m:
        a = a % m
    g, x, _ = extended_gcd(a, m)
    if g != _ONE:
        raise ValueError("Modular inverse does not exist")
    if x < _ZERO:
        x = x + m
    return x


def montgomery(
    lhs: BigInt, rhs: BigInt, module: BigInt, r: BigInt, n_prime: BigInt
) -> BigInt:
    """Montgomery product: ``lhs * rhs * r**-1`` reduced modulo ``module``."""
    x = lhs * rhs
    m = (x * n_prime) % r
    t = (x + m * module) // r
    if t >= module:
        t = t - module
    return t


def _montgomery_setup(module: BigInt) -> tuple[BigInt, BigInt]:
    r = _ONE << module.bit_length()
    n_prime = r - mod_inverse(module, r)
    return r, n_prime


def montgomery_mul(lhs: BigInt, rhs: BigInt, module: BigInt) -> BigInt:
    """Multiply modulo an odd ``module`` through the Montgomery form."""
    r, n_prime = _montgomery_setup(module)
    r_lhs = (lhs * r) % module
    r_rhs = (rhs * r) % module
    product = montgomery(r_lhs, r_rhs, module, r, n_prime)
    return montgomery(product, _ONE, module, r, n_prime)


def binary_pow(number: BigInt, degree: BigInt) -> BigInt:
    """Raise ``number`` to a non-negative ``degree`` by left-to-right squaring."""
    _check_degree(degree)
    if degree == _ZERO:
        return BigInt(1)
    if degree == _ONE:
        return number
    if number == _ZERO or number == _ONE:
        return number

    bits = _degree_bits(degree)
    acc = number
    for bit in reversed(bits[:-1]):
        acc = karatsuba_square(acc)
        if bit:
            acc = acc * number
    return acc


def power(number: BigInt, degree: BigInt, base: int = 2) -> BigInt:
    """Raise ``number`` to ``degree`` with windows of ``log2(base)`` bits."""
    _check_degree(degree)
    width = _window_width(base)
    if degree == _ZERO:
        return BigInt(1)
    if degree == _ONE:
        return number
    if number == _ZERO or number == _ONE:
        return number

    factors = []
    acc = BigInt(1)
    for _ in range(base):
        factors.append(acc)
        acc = acc * number

    acc = BigInt(1)
    for window in _windows(degree, width):
        for _ in range(width):
            acc = karatsuba_square(acc)
        acc = acc * factors[window]
    return acc


def montgomery_pow(
    number: BigInt, degree: BigInt, module: BigInt, base: int = 2
) -> BigInt:
    """Raise ``number`` to ``degree`` modulo an odd ``module`` in Montgomery form."""
    _check_degree(degree)
    width = _window_width(base)

    r, n_prime = _montgomery_setup(module)
    r_number = (number * r) % module
    r_one = r % module

    factors = [r_one]
    acc = r_one
    for _ in range(1, base):
        acc = montgomery(acc, r_number, module, r, n_prime)
        factors.append(acc)

    acc = r_one
    for window in _windows(degree, width):
        for _ in range(width):
            acc = montgomery(acc, acc, module, r, n_prime)
        if window:
            acc = montgomery(acc, factors[window], module, r, n_prime)

    return montgomery(acc, _ONE, module, r, n_prime)