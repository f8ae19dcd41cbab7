from advent2023.days import Day
from advent2023.inputs import ANSI_BOLD, ANSI_RESET
from advent2023.run_multi import parse_time
from advent2023.runner import (
    average_duration,
    bench,
    format_duration,
    print_result,
    run_part,
    run_timed,
    solution_main,
)


def test_average_of_equal_numbers():
    assert average_duration([7, 7, 7]) == 7


def test_average_is_between_min_and_max():
    numbers = [3, 100, 57, 12]
    assert min(numbers) <= average_duration(numbers) <= max(numbers)


def test_format_duration_single_sample_has_no_samples_suffix():
    text = format_duration(1500, 1)
    assert text == " (1.5µs)"
    assert "samples" not in text


def test_format_duration_round_trips_through_parse_time():
    line = "Part 1: 0" + format_duration(2_000_000_000, 5)
    timing_str, nanos = parse_time(line)
    assert nanos == 2_000_000_000
    assert timing_str.endswith("s")


def test_format_duration_milliseconds_round_trip():
    line = "Part 2: 0" + format_duration(3_000_000, 20)
    timing_str, nanos = parse_time(line)
    assert timing_str.endswith("ms")
    assert nanos == 3_000_000


def test_run_timed_untimed_calls_hook_once():
    seen = []
    result, duration, samples = run_timed(len, "abcd", seen.append)
    assert result == 4
    assert seen == [4]
    assert samples == 1
    assert duration >= 0


def test_run_timed_timed_benchmarks():
    calls = []

    def func(text):
        calls.append(text)
        return text.upper()

    result, _, samples = run_timed(func, "x", lambda value: None, timed=True)
    assert result == "X"
    assert 10 <= samples <= 10_000
    assert len(calls) == samples + 1


def test_bench_clamps_to_minimum_for_slow_functions(capsys):
    calls = []
    _, samples = bench(calls.append, "x", 10 * 1_000_000_000)
    assert samples == 10
    assert len(calls) == 10
    assert "benching" in capsys.readouterr().out


def test_bench_clamps_to_maximum_for_fast_functions():
    calls = []
    _, samples = bench(calls.append, "x", 1)
    assert samples == 10_000
    assert len(calls) == 10_000


def test_print_result_none_final(capsys):
    print_result(None, "Part 1", " (1.0ns)")
    out = capsys.readouterr().out
    assert out.startswith("\r")
    assert "Part 1: ✖" in out


def test_print_result_none_intermediate(capsys):
    print_result(None, "Part 2", "")
    assert capsys.readouterr().out == "Part 2: ✖"


def test_print_result_single_line(capsys):
    print_result(42, "Part 1", " (1.0ns)")
    out = capsys.readouterr().out
    assert f"Part 1: {ANSI_BOLD}42{ANSI_RESET} (1.0ns)" in out


def test_print_result_multiline(capsys):
    print_result("ab\ncd", "Part 1", " (1.0ns)")
    out = capsys.readouterr().out
    assert "Part 1: ▼" in out
    assert out.endswith("ab\ncd\n")


def test_run_part_returns_and_prints(capsys):
    result = run_part(len, "hello", Day(1), 2)
    out = capsys.readouterr().out
    assert result == 5
    assert "Part 2: " in out
    assert f"{ANSI_BOLD}5{ANSI_RESET}" in out


def test_solution_main_reads_input(tmp_path, monkeypatch, capsys):
    inputs = tmp_path / "data" / "inputs"
    inputs.mkdir(parents=True)
    (inputs / "19.txt").write_text("abc", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    solution_main(Day(19), len, lambda text: text[::-1], [])
    out = capsys.readouterr().out
    assert f"Part 1: {ANSI_BOLD}3{ANSI_RESET}" in out
    assert f"Part 2: {ANSI_BOLD}cba{ANSI_RESET}" in out


def test_solution_main_skips_missing_part(tmp_path, monkeypatch, capsys):
    inputs = tmp_path / "data" / "inputs"
    inputs.mkdir(parents=True)
    (inputs / "25.txt").write_text("abc", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    solution_main(Day(25), len, None, [])
    out = capsys.readouterr().out
    assert "Part 1:" in out
    assert "Part 2:" not in out