"""
Input loaders for the CLI.

Users, events and similarity maps are plain JSON files:
- user: an object with `lat`, `lng` and `preferences`
- events: an array of event objects (extra fields are kept)
- similarity: an object mapping event id -> similarity score

We validate users/events into typed Pydantic models so the recommender can assume
a consistent shape.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from eventrank.core.env import resolve_project_path
from eventrank.domain.models import Event, User

_EVENTS_ADAPTER = TypeAdapter(list[Event])


def _read_json(path: str | Path) -> Any:
    resolved = resolve_project_path(path)
    return json.loads(resolved.read_text(encoding="utf-8"))


def load_user(path: str | Path) -> User:
    """Load and validate a user JSON object."""
    payload = _read_json(path)
    if not isinstance(payload, dict):
        raise ValueError(f"Invalid user file {path}; expected a JSON object.")
    return User.model_validate(payload)


def load_events(path: str | Path) -> list[Event]:
    """Load and validate an events JSON array."""
    payload = _read_json(path)
    if not isinstance(payload, list):
        raise ValueError(f"Invalid events file {path}; expected a JSON array.")
    return _EVENTS_ADAPTER.validate_python(payload)


def load_similarity(path: str | Path | None) -> dict[str, float]:
    """Load an optional similarity file mapping event id -> score (empty when no path)."""
    if not path:
        return {}
    payload = _read_json(path)
    if not isinstance(payload, dict):
        raise ValueError(f"Invalid similarity file {path}; expected a JSON object.")
    out: dict[str, float] = {}
    for k, v in payload.items():
        if v is None:
            continue
        out[str(k)] = float(v)
    return out
