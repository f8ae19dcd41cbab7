import pytest

from advent2023.days import Day
from advent2023.run_multi import (
    parse_exec_time,
    parse_time,
    run_multi,
    run_solution,
    solution_module_exists,
)


def test_parses_execution_times():
    res = parse_exec_time(
        [
            "Part 1: 0 (74.13ns @ 100000 samples)",
            "Part 2: 10 (74.13ms @ 99999 samples)",
            "",
        ],
        Day(1),
    )
    assert res.total_nanos == pytest.approx(74130074.13, abs=1e-6)
    assert res.part_1 == "74.13ns"
    assert res.part_2 == "74.13ms"


def test_parses_with_patterns_in_input():
    res = parse_exec_time(
        [
            "Part 1: @ @ @ ( ) ms (2s @ 5 samples)",
            "Part 2: 10s (100ms @ 1 samples)",
            "",
        ],
        Day(1),
    )
    assert res.total_nanos == pytest.approx(2100000000.0, abs=1e-6)
    assert res.part_1 == "2s"
    assert res.part_2 == "100ms"


def test_parses_missing_parts():
    res = parse_exec_time(["Part 1: ✖        ", "Part 2: ✖        ", ""], Day(1))
    assert res.total_nanos == pytest.approx(0.0, abs=1e-6)
    assert res.part_1 is None
    assert res.part_2 is None


def test_parse_time_microseconds():
    assert parse_time("Part 1: 5 (74.13µs @ 10 samples)") == ("74.13µs", pytest.approx(74130.0))


def test_parse_time_rejects_garbage():
    assert parse_time("Part 1: 5 (fast @ 10 samples)") is None


def test_unparseable_line_is_skipped(capsys):
    res = parse_exec_time(["Part 1: 5 (fast @ 10 samples)"], Day(2))
    assert res.part_1 is None
    assert res.total_nanos == 0.0
    assert "Could not parse timings" in capsys.readouterr().err


def test_missing_solution_module():
    assert solution_module_exists(Day(1)) is False
    assert run_solution(Day(1), True, False) == []


def test_run_multi_unsolved_day_timed(capsys):
    timings = run_multi({Day(1)}, False, True)
    out = capsys.readouterr().out
    assert timings.data == []
    assert "Not solved." in out
    assert "Day 01" in out


def test_run_multi_untimed_returns_none(capsys):
    assert run_multi([Day(2), Day(1)], False, False) is None
    out = capsys.readouterr().out
    assert out.index("Day 01") < out.index("Day 02")