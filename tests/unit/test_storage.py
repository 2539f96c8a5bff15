from __future__ import annotations

import pytest

from lottopick.storage import InMemoryStore, JsonFileStore, Store, StoreError


def test_in_memory_store_load_and_save():
    store = InMemoryStore()

    assert store.load("lottoCombinations") is None
    store.save("lottoCombinations", "[]")
    assert store.load("lottoCombinations") == "[]"
    assert "lottoCombinations" in store


def test_stores_satisfy_protocol(tmp_path):
    assert isinstance(InMemoryStore(), Store)
    assert isinstance(JsonFileStore(tmp_path), Store)


def test_json_file_store_round_trip(tmp_path):
    store = JsonFileStore(tmp_path / "nested")

    assert store.load("lottoCombinations") is None
    store.save("lottoCombinations", '[{"id": 1}]')

    assert (tmp_path / "nested" / "lottoCombinations.json").read_text(encoding="utf-8") == '[{"id": 1}]'
    assert store.load("lottoCombinations") == '[{"id": 1}]'
    assert [path.name for path in (tmp_path / "nested").iterdir()] == ["lottoCombinations.json"]


def test_json_file_store_overwrites_value(tmp_path):
    store = JsonFileStore(tmp_path)

    store.save("key", "first")
    store.save("key", "second")

    assert store.load("key") == "second"


def test_json_file_store_rejects_path_like_keys(tmp_path):
    store = JsonFileStore(tmp_path)

    with pytest.raises(StoreError, match="Invalid store key"):
        store.save("../escape", "[]")


def test_json_file_store_wraps_os_errors(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = JsonFileStore(blocker)

    with pytest.raises(StoreError, match="Failed to write"):
        store.save("key", "[]")
