from __future__ import annotations

# This module ranks candidate events for one user.
# Each event gets four signals, blended with the configured weights:
# - similarity: precomputed affinity supplied by the caller (id -> score)
# - category: 1 if the event's category is one of the user's preferences
# - distance: great-circle distance to the user, decayed into (0, 1]
# - popularity: the event's own popularity value
#
# Everything here is a pure computation over the inputs; no I/O, no shared state.

import logging
from typing import Any, Iterable, Mapping

from eventrank.config.overrides import apply_settings_overrides
from eventrank.config.settings import Settings, get_settings
from eventrank.core.geo import haversine_km
from eventrank.domain.models import Event, ScoreBreakdown, ScoreComponent, ScoredEvent, User
from eventrank.scoring.composite import category_match, distance_decay, lookup_similarity, similarity_index

logger = logging.getLogger(__name__)


def _as_user(user: User | Mapping[str, Any]) -> User:
    return user if isinstance(user, User) else User.model_validate(user)


def _as_event(event: Event | Mapping[str, Any]) -> Event:
    return event if isinstance(event, Event) else Event.model_validate(event)


def _breakdown(user: User, event: Event, index: Mapping[str, Any], settings: Settings) -> ScoreBreakdown:
    weights = settings.scoring.weights

    distance_km = haversine_km(user, event, radius_km=settings.geo.earth_radius_km)

    similarity = lookup_similarity(index, event.id)
    category = float(category_match(event.categories, user.preferences))
    popularity = float(event.popularity or 0)

    # (name, raw value, blended score, weight); order fixes the summation order.
    signals = [
        ("similarity", similarity, similarity, weights.similarity),
        ("category", category, category, weights.category),
        ("distance", distance_km, distance_decay(distance_km), weights.distance),
        ("popularity", popularity, popularity, weights.popularity),
    ]

    components = []
    for name, value, score, weight in signals:
        components.append(
            ScoreComponent(
                name=name,
                value=value,
                score=score,
                weight=float(weight),
                contribution=score * float(weight),
            )
        )

    return ScoreBreakdown(
        event_id=event.id,
        total_score=sum(c.contribution for c in components),
        components=components,
    )


def explain_event(
    user: User | Mapping[str, Any],
    event: Event | Mapping[str, Any],
    event_similarity: Mapping[Any, Any] | None,
    *,
    settings: Settings | None = None,
) -> ScoreBreakdown:
    """Compute the per-signal breakdown whose contributions sum to the event score."""
    return _breakdown(
        _as_user(user), _as_event(event), similarity_index(event_similarity), settings or get_settings()
    )


def score_event(
    user: User | Mapping[str, Any],
    event: Event | Mapping[str, Any],
    event_similarity: Mapping[Any, Any] | None,
    *,
    settings: Settings | None = None,
) -> float:
    """Return the blended recommendation score for one event."""
    return explain_event(user, event, event_similarity, settings=settings).total_score


def get_recommended_events(
    user: User | Mapping[str, Any],
    events: Iterable[Event | Mapping[str, Any]],
    event_similarity: Mapping[Any, Any] | None,
    limit: int | None = 5,
    *,
    settings: Settings | None = None,
    settings_overrides: Mapping[str, Any] | None = None,
) -> list[ScoredEvent]:
    """Score every event for `user` and return the top `limit`, best first.

    Ties keep their input order. `limit=None` falls back to `scoring.top_n_default`;
    a non-positive limit returns an empty list.
    """
    settings = apply_settings_overrides(settings or get_settings(), settings_overrides)
    if limit is None:
        limit = settings.scoring.top_n_default

    user = _as_user(user)
    index = similarity_index(event_similarity)
    scored: list[ScoredEvent] = []
    for raw in events:
        event = _as_event(raw)
        score = _breakdown(user, event, index, settings).total_score
        # Keep exactly the fields the caller supplied (extras included), then add the score.
        payload = {**event.model_dump(exclude_unset=True), "score": score}
        scored.append(ScoredEvent.model_validate(payload))

    # list.sort is stable, including with reverse=True.
    scored.sort(key=lambda e: e.score, reverse=True)
    top = scored[: max(0, int(limit))]
    logger.debug(
        "Scored %d events for user at (%s, %s); returning %d", len(scored), user.lat, user.lng, len(top)
    )
    return top
