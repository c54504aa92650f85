"""Tests for the calculation history store."""
import json
import pytest
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from rpncalc.history.store import HistoryEntry, HistoryStore


def test_add_keeps_newest_first():
    """Test that the most recent entry comes first."""
    store = HistoryStore()
    store.add("1+1", "2")
    store.add("2*3", "6")

    assert [e.expression for e in store.entries()] == ["2*3", "1+1"]
    assert len(store) == 2


def test_capacity_evicts_oldest():
    """Test that entries beyond capacity drop the oldest."""
    store = HistoryStore(capacity=3)
    for i in range(5):
        store.add(f"{i}+0", str(i))

    assert [e.expression for e in store.entries()] == ["4+0", "3+0", "2+0"]


def test_default_capacity_is_fifty():
    """Test the default cap of 50 entries."""
    store = HistoryStore()
    for i in range(55):
        store.add(f"{i}*1", str(i))

    entries = store.entries()
    assert len(entries) == 50
    assert entries[0].expression == "54*1"
    assert entries[-1].expression == "5*1"


def test_invalid_capacity_raises():
    """Test that a store must hold at least one entry."""
    with pytest.raises(ValueError):
        HistoryStore(capacity=0)


def test_entries_returns_a_copy():
    """Test that callers cannot mutate the stored list."""
    store = HistoryStore()
    store.add("1+1", "2")
    store.entries().clear()
    assert len(store) == 1


def test_persists_to_json(tmp_path):
    """Test that entries are written to and read back from disk."""
    path = tmp_path / "history.json"
    store = HistoryStore(path)
    store.add("2+3", "5", timestamp=datetime(2025, 11, 5, 10, 0))

    data = json.loads(path.read_text())
    assert data == [{"timestamp": "2025-11-05T10:00:00",
                     "expression": "2+3", "result": "5"}]

    reloaded = HistoryStore(path)
    assert reloaded.entries() == store.entries()


def test_load_truncates_to_capacity(tmp_path):
    """Test that an oversized file is cut to the newest entries."""
    path = tmp_path / "history.json"
    big = HistoryStore(path, capacity=10)
    for i in range(10):
        big.add(f"{i}+1", str(i + 1))

    small = HistoryStore(path, capacity=4)
    assert [e.expression for e in small.entries()] == ["9+1", "8+1", "7+1", "6+1"]


def test_corrupt_file_starts_empty(tmp_path):
    """Test that unreadable JSON yields an empty history."""
    path = tmp_path / "history.json"
    path.write_text("{not json")

    store = HistoryStore(path)
    assert store.entries() == []


@pytest.mark.parametrize("content", [
    '[{"expression": "1"}]',
    '{"expression": "1", "result": "1"}',
    '[{"timestamp": "yesterday", "expression": "1", "result": "1"}]',
    '[1, 2]',
])
def test_wrong_shape_file_starts_empty(tmp_path, content):
    """Test that valid JSON with unexpected entries yields an empty history."""
    path = tmp_path / "history.json"
    path.write_text(content)

    store = HistoryStore(path)
    assert store.entries() == []
    store.add("1+1", "2")
    assert len(HistoryStore(path).entries()) == 1


def test_clear(tmp_path):
    """Test that clear empties memory and file."""
    path = tmp_path / "history.json"
    store = HistoryStore(path)
    store.add("1+1", "2")
    store.clear()

    assert store.entries() == []
    assert json.loads(path.read_text()) == []


def test_entry_format():
    """Test the display line of an entry."""
    entry = HistoryEntry(datetime(2025, 11, 5, 10, 0), "2+3", "5")
    assert entry.format() == "[2025-11-05 10:00] 2+3 = 5"


def test_concurrent_adds_respect_capacity(tmp_path):
    """Test that concurrent writers never exceed the cap."""
    store = HistoryStore(tmp_path / "history.json", capacity=20)

    def worker(n):
        for i in range(10):
            store.add(f"{n}+{i}", str(n + i))

    with ThreadPoolExecutor(max_workers=4) as pool:
        list(pool.map(worker, range(4)))

    assert len(store) == 20
    assert len(HistoryStore(tmp_path / "history.json", capacity=20).entries()) == 20


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
