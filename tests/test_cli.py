import pytest

from bintlib.benchmark import TRUE_SUB
from bintlib.bigint import BigInt
from bintlib.cli import main


def test_default_numbers_print_known_difference(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == str(TRUE_SUB)


def test_explicit_numbers(capsys):
    assert main(["12345678901234567890", "-455675676762455675676762"]) == 0
    assert capsys.readouterr().out.strip() == "455688022441356910244652"


def test_explicit_numbers_reversed(capsys):
    assert main(["-455675676762455675676762", "12345678901234567890"]) == 0
    assert capsys.readouterr().out.strip() == "-455688022441356910244652"


def test_output_matches_library_subtraction(capsys):
    lhs, rhs = "98765432101234567890123456789", "12345678909876543210987654321"
    main([lhs, rhs])
    assert capsys.readouterr().out.strip() == str(BigInt(lhs) - BigInt(rhs))


def test_invalid_digit_is_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["12a", "3"])
    assert excinfo.value.code == 2
    assert "Error parsing big number" in capsys.readouterr().err


def test_lone_minus_is_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-", "3"])
    assert excinfo.value.code == 2
    assert "Big number is undefined" in capsys.readouterr().err