import pytest

from kisan_assistant.collections.database import init_database
from kisan_assistant.core.kv_store import FileKeyValueStore, MemoryKeyValueStore, create_kv_store


def test_file_store_round_trip(tmp_path):
    store = FileKeyValueStore(root=tmp_path)
    assert store.get("kisan_users_db") is None
    store.set("kisan_users_db", "[]")
    assert store.get("kisan_users_db") == "[]"
    store.remove("kisan_users_db")
    assert store.get("kisan_users_db") is None
    store.remove("kisan_users_db")


def test_file_store_survives_restart(tmp_path):
    db = init_database(FileKeyValueStore(root=tmp_path))
    db.posts.insert_one(db.posts.find()[0].model_copy(update={"id": "999"}))

    reopened = init_database(FileKeyValueStore(root=tmp_path))
    assert reopened.posts.find()[0].id == "999"
    assert len(reopened.posts.find()) == 4


def test_file_store_leaves_no_temp_files(tmp_path):
    store = FileKeyValueStore(root=tmp_path)
    store.set("a", "1")
    store.set("a", "2")
    assert sorted(p.name for p in tmp_path.iterdir()) == ["a.json"]


@pytest.mark.parametrize("key", ["", "../escape", "nested/key", ".."])
def test_file_store_rejects_path_like_keys(tmp_path, key):
    with pytest.raises(ValueError):
        FileKeyValueStore(root=tmp_path).get(key)


def test_memory_store_remove_missing_key():
    store = MemoryKeyValueStore({"a": "1"})
    store.remove("b")
    assert store.get("a") == "1"


def test_create_kv_store_backends(tmp_path, monkeypatch):
    assert isinstance(create_kv_store("memory"), MemoryKeyValueStore)
    monkeypatch.setattr("kisan_assistant.core.kv_store.settings.STORAGE_DIR", str(tmp_path))
    assert isinstance(create_kv_store("file"), FileKeyValueStore)
    with pytest.raises(ValueError):
        create_kv_store("redis")


def test_non_utf8_collection_reads_as_empty_and_is_reseeded(tmp_path):
    (tmp_path / "kisan_listings_db.json").write_bytes(b"\xff\xfe[garbage")

    db = init_database(FileKeyValueStore(root=tmp_path))

    assert [listing.id for listing in db.listings.find()] == ["6", "5", "4", "3", "2", "1"]


def test_failed_write_removes_temp_file(tmp_path, monkeypatch):
    store = FileKeyValueStore(root=tmp_path)
    store.set("a", "1")

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("kisan_assistant.core.kv_store.os.replace", fail_replace)
    with pytest.raises(OSError):
        store.set("a", "2")

    assert sorted(p.name for p in tmp_path.iterdir()) == ["a.json"]
    assert store.get("a") == "1"
