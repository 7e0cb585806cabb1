"""
Domain models (Pydantic).

These types represent the stable "contract" between layers:
- recommender inputs (`User`, `Event`)
- ranked output (`ScoredEvent`)
- explainable scoring output (`ScoreBreakdown`)

Coordinates are deliberately not range-checked: out-of-range values still produce a
(geographically meaningless) distance. Missing or non-numeric coordinates are rejected
when the model is built.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from eventrank.scoring.composite import ComponentName


class User(BaseModel):
    """The person recommendations are computed for."""

    model_config = ConfigDict(extra="allow")

    lat: float
    lng: float
    preferences: list[Any] = Field(default_factory=list)


class Event(BaseModel):
    """A candidate event; unknown fields are kept and passed through untouched."""

    model_config = ConfigDict(extra="allow")

    # Any identifier; passed through untouched.
    id: Any = None
    lat: float
    lng: float
    # A single category value, compared by equality against `User.preferences`.
    categories: Any = None
    popularity: float | None = None


class ScoredEvent(Event):
    """An Event plus the blended recommendation score."""

    score: float


class ScoreComponent(BaseModel):
    """One explainable signal (similarity/category/distance/popularity)."""

    name: ComponentName
    value: float
    score: float
    weight: float
    contribution: float


class ScoreBreakdown(BaseModel):
    """Explainable breakdown for an event; `total_score` is the ranking score."""

    event_id: Any
    total_score: float
    components: list[ScoreComponent]
