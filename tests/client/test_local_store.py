from app.schemas.wishlist import WishList
from client.local_store import LocalListStore


def _list(list_id: str = "l1") -> WishList:
    return WishList(id=list_id, owner="지민", birthday="1999-03-14", created_at=1700000000000)


def test_round_trip_keeps_camel_case_on_disk(tmp_path):
    path = tmp_path / "nested" / "db.json"
    store = LocalListStore(path)

    store.save(_list())

    assert '"createdAt": 1700000000000' in path.read_text(encoding="utf-8")
    assert store.get("l1") == _list()


def test_missing_file_and_unknown_id(tmp_path):
    store = LocalListStore(tmp_path / "db.json")

    assert store.get("l1") is None
    store.delete("l1")


def test_corrupt_file_reads_as_empty(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("{not json", encoding="utf-8")
    store = LocalListStore(path)

    assert store.get("l1") is None
    store.save(_list())
    assert store.get("l1") is not None


def test_delete(tmp_path):
    store = LocalListStore(tmp_path / "db.json")
    store.save(_list("l1"))
    store.save(_list("l2"))

    store.delete("l1")

    assert store.get("l1") is None
    assert store.get("l2") is not None
