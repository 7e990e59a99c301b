import re

import pytest

from benchmarker import benchmark

TIMINGS = [10.0, 20.0, 30.0, 40.0, 1000.0]
HEADER = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] (.+) - Running (\d+) iterations$")


def test_log_contents(scripted, tmp_path, capsys):
    log_path = tmp_path / "bench.log"
    benchmark(scripted(TIMINGS), iterations=5, label="fmt", log_file=log_path)

    lines = log_path.read_text(encoding="utf-8").split("\n")
    match = HEADER.match(lines[0])
    assert match and match.groups() == ("fmt", "5")
    assert lines[1] == "Removed 2 outliers, keeping 3 measurements"
    assert lines[2] == ""
    assert lines[3] == "------ fmt Summary ------"
    assert lines[4] == "> Based on 3 runs:"
    assert lines[6].startswith("  Metric")
    assert "Average" in lines[8] and "30.000 ms" in lines[8]
    # summary ends with its separator followed by a blank line
    assert lines[-3] == "-" * len("------ fmt Summary ------")
    assert lines[-2] == ""
    assert lines[-1] == ""


def test_log_is_appended_not_truncated(scripted, tmp_path, capsys):
    log_path = tmp_path / "bench.log"
    log_path.write_text("previous run\n", encoding="utf-8")

    benchmark(scripted([1.0]), iterations=2, label="first", log_file=str(log_path))
    benchmark(scripted([1.0]), iterations=2, label="second", log_file=str(log_path))

    text = log_path.read_text(encoding="utf-8")
    assert text.startswith("previous run\n")
    headers = [m.group(1) for m in map(HEADER.match, text.splitlines()) if m]
    assert headers == ["first", "second"]


def test_verbose_lines_logged(scripted, tmp_path, capsys):
    log_path = tmp_path / "bench.log"
    benchmark(scripted([1.5]), iterations=2, verbose=True, log_file=log_path)
    text = log_path.read_text(encoding="utf-8")
    assert "Iteration 1: 1.50 ms\nIteration 2: 1.50 ms\n" in text


def test_no_outlier_notice_when_not_trimmed(scripted, tmp_path, capsys):
    log_path = tmp_path / "bench.log"
    benchmark(scripted(TIMINGS), iterations=5, remove_outliers=False, log_file=log_path)
    assert "outliers" not in log_path.read_text(encoding="utf-8")


def test_unwritable_log_destination_raises(tmp_path, capsys):
    calls = []
    missing = tmp_path / "no-such-dir" / "bench.log"

    with pytest.raises(OSError):
        benchmark(lambda: calls.append(1), iterations=3, log_file=missing)
    assert calls == []


def test_utf8_label(scripted, tmp_path, capsys):
    log_path = tmp_path / "bench.log"
    benchmark(scripted([1.0]), iterations=1, label="résumé ✓", log_file=log_path)
    assert "résumé ✓ - Running 1 iterations" in log_path.read_text(encoding="utf-8")
