import pytest

from benchmarker.utils import memory
from benchmarker.utils.memory import current_memory_bytes, force_collection, format_bytes


@pytest.mark.parametrize("num_bytes, expected", [
    (0, "0 B"),
    (512, "512 B"),
    (1023, "1023 B"),
    (1024, "1 KB"),
    (1536, "1.5 KB"),
    (3048, "2.98 KB"),
    (5 * 1024 * 1024, "5 MB"),
    (3 * 1024 ** 3, "3 GB"),
    (2048 * 1024 ** 3, "2048 GB"),
    (-2048, "-2 KB"),
])
def test_format_bytes(num_bytes, expected):
    assert format_bytes(num_bytes) == expected


def test_force_collection_runs_two_passes(monkeypatch):
    calls = []
    monkeypatch.setattr(memory.gc, "collect", lambda *a: calls.append(a) or 0)
    force_collection()
    assert len(calls) == 2


def test_current_memory_bytes_positive():
    assert current_memory_bytes() > 0
