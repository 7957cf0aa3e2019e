import pytest

from bintlib.benchmark import BenchmarkResult, format_report, main, run_benchmarks


@pytest.fixture(scope="module")
def results():
    return run_benchmarks()


def test_every_operation_is_valid(results):
    assert len(results) == 19
    assert [r for r in results if not r.valid] == []


def test_operations_in_order(results):
    assert [r.operation for r in results][:10] == [
        "summation",
        "substruction",
        "multiplication",
        "squaring",
        "division",
        "remainder",
        "left shift",
        "right shift",
        "gcd",
        "modular inverse",
    ]


def test_algorithms_listed(results):
    algorithms = [r.algorithm for r in results]
    assert algorithms[10:] == [
        "binary",
        "q-ary (4)",
        "q-ary (8)",
        "q-ary (16)",
        "montgomery",
        "montgomery (2)",
        "montgomery (4)",
        "montgomery (8)",
        "montgomery (16)",
    ]


def test_times_are_non_negative(results):
    assert all(r.seconds >= 0 for r in results)


def test_report_header():
    lines = format_report([]).split("\n")
    assert lines == [
        "operation\t\talgorithm\t\ttime, s\t\t\tstatus",
        "-----------------\t-------------\t\t------------\t\t----------",
    ]


def test_report_row_layout():
    row = format_report([BenchmarkResult("gcd", "euclidean", 0.5, False)]).split("\n")[2]
    assert row == "gcd\t\t\teuclidean\t\t0.5000000\t\tinvalid"


def test_report_columns_align(results):
    lines = format_report(results).split("\n")
    assert len(lines) == len(results) + 2
    for line, result in zip(lines[2:], results):
        expanded = line.expandtabs(8)
        assert expanded[24:].startswith(result.algorithm)
        assert expanded[48:].startswith(f"{result.seconds:.7f}")
        assert expanded[72:] == ("valid" if result.valid else "invalid")


def test_main_prints_all_valid(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    lines = out.strip().split("\n")
    assert len(lines) == 21
    assert all(line.endswith("\tvalid") for line in lines[2:])