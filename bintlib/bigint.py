"""Arbitrary-precision signed integers stored as little-endian base 2**32 chunks."""

from __future__ import annotations

import struct
from itertools import chain, repeat, zip_longest
from typing import Iterable, Union

BASE = 1 << 32
_MASK = BASE - 1
_U64 = (1 << 64) - 1
_DIGITS = frozenset("0123456789")
_GROUP = 18
_GROUP_BASE = 10**_GROUP


def _strip(chunks: list[int]) -> list[int]:
    """Drop high zero chunks, keeping at least one chunk when there is any."""
    while len(chunks) > 1 and chunks[-1] == 0:
        chunks.pop()
    return chunks


def _decimal_to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _GROUP):
        piece = digits[start:start + _GROUP]
        value = value * 10 ** len(piece) + int(piece)
    return value


def _int_to_decimal(value: int) -> str:
    pieces = []
    while True:
        value, low = divmod(value, _GROUP_BASE)
        pieces.append(low)
        if not value:
            break
    head, *rest = reversed(pieces)
    return str(head) + "".join(f"{piece:0{_GROUP}d}" for piece in rest)


def _split_base(value: int, base: int) -> list[int]:
    chunks = []
    while True:
        value, low = divmod(value, base)
        chunks.append(low)
        if not value:
            return chunks


def _chunks_to_int(chunks: Iterable[int]) -> int:
    chunks = tuple(chunks)
    return int.from_bytes(struct.pack(f"<{len(chunks)}I", *chunks), "little")


def parse_number(number: str, base: int = BASE) -> list[int]:
    """Split an unsigned decimal string into little-endian digits of ``base``."""
    for position, symbol in enumerate(number):
        if symbol not in _DIGITS:
            raise ValueError(
                f"Error parsing big number: {symbol!r} on position {position}"
            )
    if not number:
        return []
    return _split_base(_decimal_to_int(number), base)


def concat_number(chunks: Iterable[int], is_negative: bool = False) -> str:
    """Render little-endian base 2**32 chunks as a decimal string."""
    chunks = tuple(chunks)
    digits = _int_to_decimal(_chunks_to_int(chunks)) if chunks else ""
    return ("-" if is_negative else "") + digits


class BigInt:
    """An immutable signed integer made of 32-bit chunks, lowest chunk first."""

    __slots__ = ("_chunks", "_is_negative")

    def __init__(self, value: Union[int, str] = 0, is_negative: bool = False):
        if isinstance(value, str):
            if is_negative:
                raise ValueError("the sign of a textual number is given by its text")
            if not value:
                raise ValueError("Big number is undefined")
            negative = value.startswith("-")
            digits = value[1:] if negative else value
            if not digits:
                raise ValueError("Big number is undefined")
            chunks = parse_number(digits)
        elif isinstance(value, int):
            if value < 0:
                raise ValueError("magnitude must be non-negative; use is_negative")
            chunks = _split_base(value, BASE)
            negative = is_negative
        else:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")
        self._chunks = tuple(_strip(chunks)) or (0,)
        self._is_negative = bool(negative)

    @classmethod
    def _make(cls, chunks: Iterable[int], is_negative: bool) -> "BigInt":
        number = object.__new__(cls)
        number._chunks = tuple(_strip(list(chunks))) or (0,)
        number._is_negative = bool(is_negative)
        return number

    @classmethod
    def from_chunks(cls, chunks: Iterable[int], is_negative: bool = False) -> "BigInt":
        """Build a number from little-endian 32-bit chunks."""
        chunks = list(chunks)
        for chunk in chunks:
            if not 0 <= chunk < BASE:
                raise ValueError(f"chunk out of range: {chunk}")
        return cls._make(chunks, is_negative)

    @property
    def chunks(self) -> tuple[int, ...]:
        """The magnitude's 32-bit chunks, lowest first."""
        return self._chunks

    @property
    def is_negative(self) -> bool:
        return self._is_negative

    def to_string(self) -> str:
        return concat_number(self._chunks, self._is_negative)

    def to_double(self) -> float:
        """Convert to a float by truncating the mantissa."""
        sign = (1 << 63) if self._is_negative else 0
        shift = leading_zeros(self._chunks[-1])
        shifted = self << shift
        top = shifted._chunks[-1] & 0x7FFFFFFF
        mantissa = top << 21
        if len(self._chunks) > 1:
            mantissa |= shifted._chunks[-2] >> 11
        exponent = 1023 + 32 * (len(self._chunks) - 1) + 31 - shift
        bits = (sign | ((exponent << 52) & _U64) | mantissa) & _U64
        return struct.unpack("<d", struct.pack("<Q", bits))[0]

    def bit_length(self) -> int:
        if _is_zero(self):
            return 0
        return (len(self._chunks) - 1) * 32 + self._chunks[-1].bit_length()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInt('{self.to_string()}')"

    def __abs__(self) -> "BigInt":
        return bigint_abs(self)

    def __neg__(self) -> "BigInt":
        return BigInt._make(self._chunks, not self._is_negative)

    def __add__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else add(self, other)

    def __sub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else sub(self, other)

    def __mul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else karatsuba_mul(self, other)

    def __floordiv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else div(self, other)[0]

    def __mod__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else mod(self, other)

    def __lshift__(self, shift: int) -> "BigInt":
        return left_shift(self, shift)

    def __rshift__(self, shift: int) -> "BigInt":
        return right_shift(self, shift)

    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if _is_zero(self) and _is_zero(other):
            return True
        return self._chunks == other._chunks and self._is_negative == other._is_negative

    def __hash__(self) -> int:
        magnitude = _chunks_to_int(self._chunks)
        return hash(-magnitude if self._is_negative else magnitude)

    def __gt__(self, other) -> bool:
        other = _coerce(other)
        return NotImplemented if other is None else _compare(self, other) > 0

    def __lt__(self, other) -> bool:
        other = _coerce(other)
        return NotImplemented if other is None else _compare(self, other) < 0

    def __ge__(self, other) -> bool:
        other = _coerce(other)
        return NotImplemented if other is None else _compare(self, other) >= 0

    def __le__(self, other) -> bool:
        other = _coerce(other)
        return NotImplemented if other is None else _compare(self, other) <= 0


def _coerce(value) -> BigInt | None:
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int):
        return BigInt(-value, True) if value < 0 else BigInt(value)
    return None


def _is_zero(number: BigInt) -> bool:
    return number._chunks == (0,)


def _compare(lhs: BigInt, rhs: BigInt) -> int:
    if lhs == rhs:
        return 0
    lhs_negative = lhs._is_negative and not _is_zero(lhs)
    rhs_negative = rhs._is_negative and not _is_zero(rhs)
    if lhs_negative != rhs_negative:
        return -1 if lhs_negative else 1
    order = abs_cmp(lhs, rhs)
    return -order if lhs_negative else order


def abs_cmp(number1: BigInt, number2: BigInt) -> int:
    """Compare magnitudes, returning -1, 0 or 1."""
    key1 = (len(number1._chunks), number1._chunks[::-1])
    key2 = (len(number2._chunks), number2._chunks[::-1])
    return (key1 > key2) - (key1 < key2)


def sub_chunks(lhs: BigInt, rhs: BigInt) -> BigInt:
    """Subtract magnitudes, assuming ``|lhs| >= |rhs|``; the result is non-negative."""
    result = []
    borrow = 0
    for a, b in zip(lhs._chunks, chain(rhs._chunks, repeat(0))):
        diff = a - b - borrow
        borrow = 1 if diff < 0 else 0
        result.append(diff + BASE if borrow else diff)
    return BigInt._make(result, False)


def leading_zeros(value: int) -> int:
    """Count the leading zero bits of a 32-bit value."""
    return 32 - value.bit_length()


def estimate_quotient(dividend: BigInt, divider: BigInt) -> int:
    """Estimate one quotient chunk from the leading chunks, as a 32-bit value."""
    chunks = dividend._chunks
    if len(chunks) < len(divider._chunks):
        return 0
    head = (chunks[-1] << 32) | chunks[-2] if len(chunks) > 1 else 0
    estimate = min(head // divider._chunks[-1], _MASK)
    return (estimate + 2) & _MASK


def bigint_abs(number: BigInt) -> BigInt:
    return BigInt._make(number._chunks, False)


def add(lhs: BigInt, rhs: BigInt) -> BigInt:
    if lhs._is_negative == rhs._is_negative:
        result = []
        carry = 0
        for a, b in zip_longest(lhs._chunks, rhs._chunks, fillvalue=0):
            total = a + b + carry
            result.append(total & _MASK)
            carry = total >> 32
        if carry:
            result.append(carry)
        return BigInt._make(result, lhs._is_negative)

    order = abs_cmp(lhs, rhs)
    if order == 0:
        return BigInt()
    if order > 0:
        return BigInt._make(sub_chunks(lhs, rhs)._chunks, lhs._is_negative)
    return BigInt._make(sub_chunks(rhs, lhs)._chunks, rhs._is_negative)


def sub(lhs: BigInt, rhs: BigInt) -> BigInt:
    return add(lhs, BigInt._make(rhs._chunks, not rhs._is_negative))


def simple_mul(lhs: BigInt, rhs: BigInt) -> BigInt:
    """Schoolbook multiplication."""
    width = len(rhs._chunks)
    result = [0] * (len(lhs._chunks) + width)
    for i, a in enumerate(lhs._chunks):
        carry = 0
        for j, b in enumerate(rhs._chunks, start=i):
            total = result[j] + a * b + carry
            result[j] = total & _MASK
            carry = total >> 32
        result[i + width] += carry
    return BigInt._make(result, lhs._is_negative != rhs._is_negative)


def _halves(number: BigInt, at: int) -> tuple[BigInt, BigInt]:
    return (
        BigInt._make(number._chunks[:at], False),
        BigInt._make(number._chunks[at:], False),
    )


def _raised(number: BigInt, chunk_count: int) -> BigInt:
    return BigInt._make((0,) * chunk_count + number._chunks, False)


def _product(lhs: BigInt, rhs: BigInt) -> BigInt:
    if len(lhs._chunks) == 1 or len(rhs._chunks) == 1:
        return simple_mul(lhs, rhs)
    return karatsuba_mul(lhs, rhs)


def _square(number: BigInt) -> BigInt:
    if len(number._chunks) == 1:
        return simple_mul(number, number)
    return karatsuba_square(number)


def karatsuba_mul(lhs: BigInt, rhs: BigInt) -> BigInt:
    """Karatsuba multiplication, split at half the length of ``lhs``."""
    split = len(lhs._chunks) // 2
    lhs0, lhs1 = _halves(lhs, split)
    rhs0, rhs1 = _halves(rhs, split)
    high = _product(lhs1, rhs1)
    low = _product(lhs0, rhs0)
    middle = _product(lhs0 + lhs1, rhs0 + rhs1) - high - low
    result = _raised(high, 2 * split) + _raised(middle, split) + low
    return BigInt._make(result._chunks, lhs._is_negative != rhs._is_negative)


def karatsuba_square(number: BigInt) -> BigInt:
    """Karatsuba squaring; the result is always non-negative."""
    split = len(number._chunks) // 2
    low_half, high_half = _halves(number, split)
    high = _square(high_half)
    low = _square(low_half)
    middle = _square(low_half + high_half) - high - low
    result = _raised(high, 2 * split) + _raised(middle, split) + low
    return BigInt._make(result._chunks, False)


def _long_divide(lhs: BigInt, rhs: BigInt) -> tuple[list[int], BigInt]:
    """Divide magnitudes, returning quotient chunks (lowest first) and remainder."""
    if _is_zero(rhs):
        raise ZeroDivisionError("Division by zero")
    shift = leading_zeros(rhs._chunks[-1])
    dividend = bigint_abs(lhs << shift)
    divider = bigint_abs(rhs << shift)

    remainder = BigInt()
    digits = []
    for chunk in reversed(dividend._chunks):
        remainder = BigInt._make((chunk,) + remainder._chunks, False)
        if remainder < divider:
            digits.append(0)
            continue
        q = estimate_quotient(remainder, divider)
        while divider * BigInt._make((q,), False) > remainder:
            q -= 1
        digits.append(q)
        remainder = remainder - BigInt._make((q,), False) * divider
    digits.reverse()
    return digits, remainder >> shift


def div(lhs: BigInt, rhs: BigInt) -> tuple[BigInt, BigInt]:
    """Return quotient and remainder; a negative dividend gets a non-negative remainder."""
    digits, remainder = _long_divide(lhs, rhs)
    quotient = BigInt._make(digits, lhs._is_negative != rhs._is_negative)
    if lhs._is_negative and not _is_zero(remainder):
        remainder = -remainder + bigint_abs(rhs)
        quotient = quotient - BigInt(1)
    return quotient, remainder


def mod(lhs: BigInt, rhs: BigInt) -> BigInt:
    """Return the remainder, non-negative when the dividend is negative."""
    _, remainder = _long_divide(lhs, rhs)
    if lhs._is_negative and not _is_zero(remainder):
        remainder = -remainder + bigint_abs(rhs)
    return remainder


def _check_shift(shift: int) -> None:
    if shift < 0:
        raise ValueError("negative shift count")


def left_shift(number: BigInt, shift: int) -> BigInt:
    """Shift the magnitude left by ``shift`` bits, keeping the sign."""
    _check_shift(shift)
    if shift == 0:
        return number
    chunk_shift, bit_shift = divmod(shift, 32)
    chunks = [0] * chunk_shift + list(number._chunks)
    if bit_shift:
        carry = 0
        shifted = []
        for chunk in chunks:
            shifted.append(((chunk << bit_shift) & _MASK) | carry)
            carry = chunk >> (32 - bit_shift)
        if carry:
            shifted.append(carry)
        chunks = shifted
    return BigInt._make(chunks, number._is_negative)


def right_shift(number: BigInt, shift: int) -> BigInt:
    """Shift the magnitude right by ``shift`` bits, keeping the sign."""
    _check_shift(shift)
    if shift == 0:
        return number
    chunk_shift, bit_shift = divmod(shift, 32)
    chunks = list(number._chunks[chunk_shift:])
    if not chunks:
        return BigInt()
    if bit_shift:
        carry = 0
        shifted = []
        for chunk in reversed(chunks):
            shifted.append((chunk >> bit_shift) | carry)
            carry = (chunk << (32 - bit_shift)) & _MASK
        chunks = shifted[::-1]
    return BigInt._make(chunks, number._is_negative)