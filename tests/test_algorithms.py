import pytest

from bintlib.algorithms import (
    binary_pow,
    extended_gcd,
    gcd,
    mod_inverse,
    montgomery,
    montgomery_mul,
    montgomery_pow,
    power,
)
from bintlib.bigint import BigInt


def as_int(number: BigInt) -> int:
    return int(number.to_string())


# gcd

def test_gcd_basic():
    number1 = BigInt("335690610347798156")
    number2 = BigInt("79170610347800996959")
    assert gcd(number1, number2).to_string() == "6413"


def test_gcd_doubled():
    number1 = BigInt("335690610347798156") * 2
    number2 = BigInt("79170610347800996959") * 2
    assert gcd(number1, number2).to_string() == "12826"


def test_gcd_with_zero_returns_other():
    assert gcd(BigInt(12345), BigInt(0)).to_string() == "12345"


# extended gcd

def test_extended_gcd_case_1():
    g, x, y = extended_gcd(BigInt("1234567890"), BigInt("98765421"))
    assert g.to_string() == "3"
    assert x.to_string() == "-6197046"
    assert y.to_string() == "77463083"


def test_extended_gcd_case_2():
    g, x, y = extended_gcd(BigInt("2925097560"), BigInt("2216781712"))
    assert g.to_string() == "8"
    assert x.to_string() == "-86339403"
    assert y.to_string() == "113926949"


@pytest.mark.parametrize(
    "a, b",
    [
        ("1234567890", "98765421"),
        ("-1234567890", "98765421"),
        ("1234567890", "-98765421"),
        ("79170610347800996959", "335690610347798156"),
    ],
)
def test_extended_gcd_bezout_identity(a, b):
    lhs, rhs = BigInt(a), BigInt(b)
    g, x, y = extended_gcd(lhs, rhs)
    assert lhs * x + rhs * y == g


# modular inverse

def test_mod_inverse_case_1():
    result = mod_inverse(BigInt("444896441"), BigInt("47146817"))
    assert result.to_string() == "45038276"


def test_mod_inverse_case_2():
    result = mod_inverse(BigInt("47146817"), BigInt("444896441"))
    assert result.to_string() == "19897046"


def test_mod_inverse_product_is_one():
    a = BigInt("14776071682915459064")
    m = BigInt("137130462909417371581865483489043797725909059024661411704723085022816692663284008207826785132470756353352621332808019668785759110990576815741502628035997147255459016128105305451010585699069674494217365521467940783164171729442866016775055913991624626502191730619275815532321664270492537447637102633611801007453")
    inverse = mod_inverse(a, m)
    assert (a * inverse) % m == BigInt(1)


def test_mod_inverse_missing_raises():
    with pytest.raises(ValueError, match="Modular inverse does not exist"):
        mod_inverse(BigInt(4), BigInt(8))


# Montgomery

def test_montgomery_reduction_matches_definition():
    module = BigInt(97)
    r = BigInt(128)
    n_prime = r - mod_inverse(module, r)
    a, b = BigInt(45), BigInt(81)
    result = montgomery(a, b, module, r, n_prime)
    assert as_int(result) == (45 * 81 * pow(128, -1, 97)) % 97


def test_montgomery_mul_case_1():
    result = montgomery_mul(
        BigInt("98765432101234567890123456789"),
        BigInt("12345678909876543210987654321"),
        BigInt("112233445566778899001122334455"),
    )
    assert result.to_string() == "58175838322742367489756577539"


def test_montgomery_mul_case_2():
    result = montgomery_mul(
        BigInt("98765432101234567890123456789"),
        BigInt("6413641364136413641364136413"),
        BigInt("20252025202520252025202520252025"),
    )
    assert result.to_string() == "18576382700490687992584161036882"


def test_montgomery_mul_by_zero():
    result = montgomery_mul(
        BigInt("98765432101234567890123456789"),
        BigInt(),
        BigInt("20252025202520252025202520252025"),
    )
    assert result.to_string() == "0"


def test_montgomery_mul_even_module_raises():
    with pytest.raises(ValueError):
        montgomery_mul(BigInt(3), BigInt(5), BigInt(100))


# binary power

def test_binary_pow_negative_base():
    result = binary_pow(BigInt("-12345678901234567890"), BigInt("5"))
    assert result.to_string() == (
        "-286797186173370403767041767776920429666954333495933335798264659838306817363852838672048294900000"
    )


def test_binary_pow_large():
    result = binary_pow(BigInt("3594647268"), BigInt("12"))
    assert result.to_string() == (
        "4654525023350199709144256884159024567650231897595879211673181237453860263392849502712662291036849775675662376370176"
    )


def test_binary_pow_zero_degree():
    result = binary_pow(BigInt("-12345678901234567890"), BigInt())
    assert result.to_string() == "1"


def test_binary_pow_matches_builtin():
    result = binary_pow(BigInt("14776071682915459064"), BigInt("40"))
    assert as_int(result) == 14776071682915459064**40


def test_binary_pow_negative_degree_raises():
    with pytest.raises(ValueError, match="negative power"):
        binary_pow(BigInt(3), BigInt(2, True))


# windowed power

def test_power_base_4():
    result = power(BigInt("-12345678901234567890"), BigInt("5"), 4)
    assert result.to_string() == (
        "-286797186173370403767041767776920429666954333495933335798264659838306817363852838672048294900000"
    )


def test_power_base_8():
    result = power(BigInt("3594647268"), BigInt("12"), 8)
    assert result.to_string() == (
        "4654525023350199709144256884159024567650231897595879211673181237453860263392849502712662291036849775675662376370176"
    )


def test_power_degree_one():
    result = power(BigInt("-12345678901234567890"), BigInt(1), 16)
    assert result.to_string() == "-12345678901234567890"


@pytest.mark.parametrize("base", [2, 4, 8, 16])
def test_power_matches_builtin(base):
    result = power(BigInt("14776071682915459064"), BigInt("40"), base)
    assert as_int(result) == 14776071682915459064**40


@pytest.mark.parametrize("base", [0, 3, 6, 12])
def test_power_rejects_non_power_of_two(base):
    with pytest.raises(ValueError, match="not a power of 2"):
        power(BigInt(3), BigInt(4), base)


def test_power_rejects_base_one():
    with pytest.raises(ValueError, match="cannot be equal to 1"):
        power(BigInt(3), BigInt(4), 1)


def test_power_negative_degree_raises():
    with pytest.raises(ValueError, match="negative power"):
        power(BigInt(3), BigInt(4, True), 4)


# Montgomery power

MODULE = BigInt("10000000000000000000000000000000007")
NUMBER = BigInt("202520252025202520252025202520252025")


def test_montgomery_pow_base_32():
    result = montgomery_pow(NUMBER, BigInt("64136413641364136413641364136413"), MODULE, 32)
    assert result.to_string() == "4982209825957461206282418756295327"


def test_montgomery_pow_base_8():
    result = montgomery_pow(
        NUMBER, BigInt("2904202529042025290420252904202529042025"), MODULE, 8
    )
    assert result.to_string() == "4381271315878122186823853889463080"


def test_montgomery_pow_base_1024():
    result = montgomery_pow(
        NUMBER, BigInt("2904202529042025290420252904202529042025"), MODULE, 1024
    )
    assert result.to_string() == "4381271315878122186823853889463080"


@pytest.mark.parametrize("base", [2, 4, 16])
def test_montgomery_pow_matches_builtin(base):
    degree = 64136413641364136413641364136413
    result = montgomery_pow(NUMBER, BigInt(degree), MODULE, base)
    assert as_int(result) == pow(as_int(NUMBER), degree, as_int(MODULE))


def test_montgomery_pow_rejects_bad_base():
    with pytest.raises(ValueError, match="not a power of 2"):
        montgomery_pow(NUMBER, BigInt(5), MODULE, 10)


def test_montgomery_pow_negative_degree_raises():
    with pytest.raises(ValueError, match="negative power"):
        montgomery_pow(NUMBER, BigInt(5, True), MODULE, 2)