"""Tests for the seed and verification scripts."""
import json

from verify_store import check_store


def test_check_store_reports_problems(tmp_path):
    path = tmp_path / "schedules.json"
    records = [
        {"id": "a", "date": "2099-01-01T10:00:00.000Z", "description": "Tea", "createdAt": "2098-01-01T00:00:00.000Z"},
        {"id": "a", "date": "2099-01-02T10:00:00.000Z", "description": "Tea", "createdAt": "2098-01-01T00:00:00.000Z"},
        {"id": "b", "date": "2099-01-02T18:00:00.000Z", "description": "Tea", "createdAt": "2098-01-01T00:00:00.000Z"},
        {"id": "c", "date": "2001-01-01T10:00:00.000Z", "description": "Old", "createdAt": "2000-01-01T00:00:00.000Z"},
    ]
    path.write_text(json.dumps(records), encoding="utf-8")

    result = check_store(path)
    assert result["total"] == 4
    assert result["duplicate_ids"] == ["a"]
    assert result["duplicate_days"] == ["2099-01-02"]
    assert result["past"] == ["c"]


def test_check_store_clean(tmp_path):
    result = check_store(tmp_path / "missing.json")
    assert result == {"total": 0, "duplicate_ids": [], "duplicate_days": [], "past": []}


def test_seed_populates_empty_store(tmp_path, monkeypatch):
    import seed
    import store

    path = tmp_path / "schedules.json"
    monkeypatch.setattr(store, "SCHEDULES_PATH", str(path))

    seed.seed_schedules()
    seeded = store.get_store(path).load()
    assert len(seeded) == 4
    assert len({s.calendar_day for s in seeded}) == 4

    # Second run leaves existing data alone
    seed.seed_schedules()
    assert len(store.get_store(path).load()) == 4


def test_check_store_skips_unparseable_dates(tmp_path):
    path = tmp_path / "schedules.json"
    records = [
        {"id": "a", "date": "garbage", "description": "Tea", "createdAt": "2098-01-01T00:00:00.000Z"},
        {"id": "b", "date": "2099-01-02T18:00:00.000Z", "description": "Tea", "createdAt": "2098-01-01T00:00:00.000Z"},
    ]
    path.write_text(json.dumps(records), encoding="utf-8")

    result = check_store(path)
    assert result["total"] == 1
    assert result["duplicate_days"] == []
