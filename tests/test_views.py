from merobase.core.views import (
    RecencyViews, latest_edited, latest_edited_positional, latest_registered, located,
)


def _ids(rows):
    return [r["sampleID"] for r in rows]


def _fill(store, n):
    for i in range(1, n + 1):
        store.create({"projectType": "A", "projectNumber": 1, "sampleNumber": i, "sampleName": f"S{i}"})


def test_latest_registered_is_newest_first(samples):
    assert _ids(latest_registered(samples, 2)) == ["B2-2-ISO", "B2-1"]
    assert _ids(latest_registered(samples, 10)) == ["B2-2-ISO", "B2-1", "A1-2-SEM", "A1-1"]
    assert latest_registered(samples, 0) == []
    assert latest_registered([], 3) == []


def test_latest_edited_follows_last_updated(store):
    _fill(store, 3)
    store.update("A1-1", {"species": "tenuis"})
    views = RecencyViews(store)
    assert _ids(views.latest_edited(2)) == ["A1-1", "A1-3"]
    assert _ids(views.latest_registered(1)) == ["A1-3"]


def test_latest_edited_ties_and_unstamped():
    rows = [
        {"sampleID": "a", "lastUpdated": None},
        {"sampleID": "b", "lastUpdated": "2025-01-01T00:00:00Z"},
        {"sampleID": "c", "lastUpdated": "2025-01-01T00:00:00Z"},
        {"sampleID": "d"},
    ]
    assert _ids(latest_edited(rows, 4)) == ["c", "b", "d", "a"]


def test_positional_fallback(samples):
    assert _ids(latest_edited_positional(samples, 1)) == ["B2-1"]
    assert _ids(latest_edited_positional(samples, 2)) == ["B2-1", "A1-2-SEM"]
    assert _ids(latest_edited_positional(samples[:1], 1)) == ["A1-1"]
    assert latest_edited_positional([], 1) == []


def test_views_do_not_mutate_store(store):
    _fill(store, 3)
    before = store.list()
    views = RecencyViews(store, window=2)
    views.latest_registered()[0]["sampleName"] = "changed"
    views.latest_edited()
    views.latest_edited_positional()
    assert store.list() == before


def test_default_window(store):
    _fill(store, 7)
    views = RecencyViews(store, window=5)
    assert len(views.latest_registered()) == 5
    assert len(views.latest_edited()) == 5


def test_located_samples(store):
    store.create({"projectType": "A", "projectNumber": 1, "sampleNumber": 1, "sampleName": "pinned",
                  "latitude": -8.67, "longitude": 115.45})
    store.create({"projectType": "A", "projectNumber": 1, "sampleNumber": 2, "sampleName": "unpinned"})
    assert _ids(RecencyViews(store).located()) == ["A1-1"]
    assert located([]) == []


def test_latest_edited_compares_times_not_text():
    rows = [
        {"sampleID": "early", "lastUpdated": "2025-10-10T10:00:00Z"},
        {"sampleID": "later", "lastUpdated": "2025-10-10T10:00:00.500000Z"},
        {"sampleID": "js", "lastUpdated": "2025-10-10T10:00:00.123Z"},
        {"sampleID": "garbled", "lastUpdated": "yesterday"},
    ]
    assert _ids(latest_edited(rows, 4)) == ["later", "js", "early", "garbled"]


def test_now_iso_is_fixed_width():
    from merobase.core.sample import now_iso
    stamp = now_iso()
    assert stamp.endswith("Z") and len(stamp) == len("2025-10-10T10:00:00.000000Z")
