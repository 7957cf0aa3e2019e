# bintlib

Signed integers of any size, held as little-endian 32-bit chunks plus a sign.
Alongside the usual arithmetic, the library offers the algorithms behind it
as plain functions, so that they can be studied, compared and timed:

- schoolbook and Karatsuba multiplication, Karatsuba squaring;
- long division with normalisation and quotient estimation;
- Euclid's algorithm, the extended algorithm and modular inverses;
- binary and windowed (2^k-ary) exponentiation;
- Montgomery multiplication and Montgomery exponentiation.

It needs nothing outside the standard library and runs on Python 3.10 and later.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## The `BigInt` type

`BigInt` lives in `bintlib.bigint`. Values are immutable and hashable (a
`BigInt` hashes like the `int` of the same value).

```python
from bintlib.bigint import BigInt

a = BigInt("12345678901234567890")
b = BigInt("-455675676762455675676762")

print(a + b)          # -455663331083554441108872
print(a - b)          # 455688022441356910244652
print(a * -b)         # 5625625588412031906172790778460584384372180
print(b < a)          # True
print(a.bit_length()) # 64
print(a.chunks)       # the 32-bit chunks, least significant first
print(a.is_negative)  # False
```

A `BigInt` can be built from a decimal string with an optional leading `-`,
or from a non-negative `int` together with an `is_negative` flag:
`BigInt(5, True)` is minus five. An empty string, a lone `-`, any character
other than digits after the sign, a negative `int`, or `is_negative` given
together with a string raises `ValueError`.
`BigInt.from_chunks(chunks, is_negative)` builds a value straight from a
sequence of 32-bit chunks and raises `ValueError` for a chunk out of range.

The operators `+`, `-`, `*`, `//`, `%`, the comparisons and `==` accept a
`BigInt` or a plain `int` on the right-hand side. Unary `-` and `abs()` work
as expected.

Division rounds towards minus infinity and the remainder is never negative:

```python
print(BigInt("-10") // BigInt("3"))   # -4
print(BigInt("-10") % BigInt("3"))    # 2
```

Dividing by zero raises `ZeroDivisionError`.

Shifts move the bits of the magnitude and keep the sign; a negative shift
count raises `ValueError`:

```python
print(BigInt("-12345678901234567890") << 100)
# -15650007269374987633198475872814597484617284976640
```

`to_string()` (also `str()`) gives the decimal form, and `to_double()` gives
a `float` built from the top bits with the rest of the mantissa truncated.

## Lower-level functions

`bintlib.bigint` also exposes the building blocks used by the operators:
`parse_number`, `concat_number`, `abs_cmp`, `sub_chunks`, `leading_zeros`,
`estimate_quotient`, `bigint_abs`, `add`, `sub`, `simple_mul`,
`karatsuba_mul`, `karatsuba_square`, `div`, `mod`, `left_shift` and
`right_shift`.

```python
from bintlib.bigint import BigInt, div, karatsuba_square, parse_number

print(parse_number("12345678901234567890"))   # [3944680146, 2874452364]
q, r = div(BigInt("4556756767624525666272634167235675676762"),
           BigInt("12345678901234567890"))
print(q, r)   # 369097301499462292799 1512927180252052652
print(karatsuba_square(BigInt("12312312312312321")))
# 151593034475917572731289848407041
```

## Number-theoretic algorithms

`bintlib.algorithms` provides `gcd`, `extended_gcd`, `mod_inverse`,
`montgomery`, `montgomery_mul`, `binary_pow`, `power` and `montgomery_pow`.

```python
from bintlib.bigint import BigInt
from bintlib.algorithms import (
    binary_pow, extended_gcd, gcd, mod_inverse,
    montgomery_mul, montgomery_pow, power,
)

print(gcd(BigInt("335690610347798156"), BigInt("79170610347800996959")))  # 6413

g, x, y = extended_gcd(BigInt("1234567890"), BigInt("98765421"))
print(g, x, y)   # 3 -6197046 77463083

print(mod_inverse(BigInt("444896441"), BigInt("47146817")))   # 45038276

print(binary_pow(BigInt("3594647268"), BigInt("12")))
print(power(BigInt("-12345678901234567890"), BigInt("5"), 4))

print(montgomery_mul(BigInt("98765432101234567890123456789"),
                     BigInt("12345678909876543210987654321"),
                     BigInt("112233445566778899001122334455")))
# 58175838322742367489756577539

print(montgomery_pow(BigInt("202520252025202520252025202520252025"),
                     BigInt("64136413641364136413641364136413"),
                     BigInt("10000000000000000000000000000000007"), 32))
# 4982209825957461206282418756295327
```

The `base` argument of `power` and `montgomery_pow` is the window size of the
exponentiation and must be a power of two greater than one; anything else,
a negative exponent, or a modulus with no inverse raises `ValueError`.
Montgomery arithmetic needs an odd modulus.

## Commands

Two commands are installed with the package.

```
bintlib [LHS [RHS]]
```

prints `LHS - RHS` for two decimal integers. Either argument may be left out,
in which case a built-in sample number of several hundred digits is used.

```
bintlib-bench
```

times every operation and algorithm on fixed large inputs, checks each result
against its known value and prints a tab-aligned table with the operation,
the algorithm, the time in seconds and whether the result was valid. The same
is available from Python through `bintlib.benchmark.run_benchmarks()`, which
returns a list of `BenchmarkResult` records, and `format_report(results)`,
which renders them as that table.