import json

import pytest
from pydantic import ValidationError

from eventrank.catalog.loader import load_events, load_similarity, load_user


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_user_and_events(tmp_path):
    user_path = _write(tmp_path / "user.json", {"lat": 25.03, "lng": 121.56, "preferences": ["music", "food"]})
    events_path = _write(
        tmp_path / "events.json",
        [
            {"id": 1, "lat": 25.04, "lng": 121.5, "categories": "music", "title": "Jazz night"},
            {"id": "e-2", "lat": 25.0, "lng": 121.6, "categories": "food", "popularity": 0.8},
        ],
    )

    user = load_user(user_path)
    events = load_events(events_path)

    assert user.preferences == ["music", "food"]
    assert [e.id for e in events] == [1, "e-2"]
    assert events[0].title == "Jazz night"
    assert events[0].popularity is None
    assert events[1].popularity == 0.8


def test_load_events_requires_an_array(tmp_path):
    path = _write(tmp_path / "events.json", {"id": 1})
    with pytest.raises(ValueError, match="expected a JSON array"):
        load_events(path)


def test_load_user_requires_an_object(tmp_path):
    path = _write(tmp_path / "user.json", [1, 2])
    with pytest.raises(ValueError, match="expected a JSON object"):
        load_user(path)


def test_load_events_rejects_missing_coordinates(tmp_path):
    path = _write(tmp_path / "events.json", [{"id": 1, "lat": 1.0}])
    with pytest.raises(ValidationError):
        load_events(path)


def test_load_similarity(tmp_path):
    path = _write(tmp_path / "sim.json", {"1": 0.5, "e-2": 1, "skip": None})
    assert load_similarity(path) == {"1": 0.5, "e-2": 1.0}
    assert load_similarity(None) == {}
