"""
Shared scoring utilities.

Small, reusable helpers that turn raw event signals into blendable numbers:
- `distance_decay`: map kilometers onto (0, 1], 1 at the user's location
- `category_match`: 1/0 membership of the event category in the user's preferences
- `similarity_index` / `lookup_similarity`: read a precomputed similarity score for an event id
"""

from __future__ import annotations

from typing import Any, Literal, Mapping

ComponentName = Literal["similarity", "category", "distance", "popularity"]


def distance_decay(distance_km: float) -> float:
    """Convert a distance into a closeness score: `1 / (1 + d)`."""
    return 1.0 / (1.0 + distance_km)


def _same_value(a: Any, b: Any) -> bool:
    # Python's `True == 1`; booleans only ever equal booleans here.
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a is b
    return a == b


def category_match(category: Any, preferences: list[Any]) -> int:
    """Return 1 when `category` equals one of the preferences, else 0.

    The event category is a single value; this is a membership test, not a set
    intersection, so a list-valued category only matches an identical list.
    Booleans never match numbers (`True` is not a match for a preference of `1`).
    """
    return 1 if any(_same_value(category, p) for p in preferences) else 0


def id_key(event_id: Any) -> str:
    """Canonical string form of an id; `1`, `1.0` and `"1"` share the key `"1"`."""
    if isinstance(event_id, float) and event_id.is_integer():
        return str(int(event_id))
    return str(event_id)


def similarity_index(similarity: Mapping[Any, Any] | None) -> dict[str, Any]:
    """Re-key a similarity mapping by `id_key` so int and str ids find each other."""
    if not similarity:
        return {}
    return {id_key(k): v for k, v in similarity.items()}


def lookup_similarity(index: Mapping[str, Any], event_id: Any) -> float:
    """Return the similarity score for `event_id` from a `similarity_index` (0 when missing or falsy)."""
    return float(index.get(id_key(event_id)) or 0)
