import json

from vanguard_velocity.config import HIGH_SCORE_KEY
from vanguard_velocity.storage import HighScoreStore, JsonFileStorage, MemoryStorage


def test_memory_storage() -> None:
    store = MemoryStorage()
    assert store.get("a") is None
    store.set("a", "1")
    assert store.get("a") == "1"


def test_json_file_storage_round_trip(tmp_path) -> None:
    path = tmp_path / "nested" / "scores.json"
    store = JsonFileStorage(path)
    assert store.get(HIGH_SCORE_KEY) is None
    store.set(HIGH_SCORE_KEY, "750")
    store.set("other", "x")
    assert JsonFileStorage(path).get(HIGH_SCORE_KEY) == "750"
    assert json.loads(path.read_text(encoding="utf-8")) == {HIGH_SCORE_KEY: "750", "other": "x"}


def test_json_file_storage_corrupt_file_reads_empty(tmp_path) -> None:
    path = tmp_path / "scores.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileStorage(path)
    assert store.get(HIGH_SCORE_KEY) is None
    store.set(HIGH_SCORE_KEY, "10")
    assert store.get(HIGH_SCORE_KEY) == "10"


def test_json_file_storage_non_object_reads_empty(tmp_path) -> None:
    path = tmp_path / "scores.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert JsonFileStorage(path).get(HIGH_SCORE_KEY) is None


def test_high_score_store_load_and_save() -> None:
    hs = HighScoreStore(MemoryStorage())
    assert hs.load_high_score() == 0
    hs.save_high_score(1234)
    assert hs.load_high_score() == 1234
    assert hs.storage.get(HIGH_SCORE_KEY) == "1234"


def test_malformed_high_score_reads_zero() -> None:
    for raw in ("abc", "", "12.5", "-40"):
        hs = HighScoreStore(MemoryStorage({HIGH_SCORE_KEY: raw}))
        assert hs.load_high_score() == 0
    assert HighScoreStore(MemoryStorage({HIGH_SCORE_KEY: " 77 "})).load_high_score() == 77
