"""
Explainability formatting for the CLI.

Each signal is shown with what was measured, its weight and what it added to the
total, e.g. `distance=12.4km->0.075 (w=0.20, +0.015)`.
"""

from __future__ import annotations

from eventrank.domain.models import ScoreBreakdown, ScoreComponent


def format_component(comp: ScoreComponent) -> str:
    """Render one signal as `name=measurement (w=weight, +contribution)`."""
    if comp.name == "distance":
        measured = f"{comp.value:.1f}km->{comp.score:.3f}"
    elif comp.name == "category":
        measured = "match" if comp.value else "miss"
    else:
        measured = f"{comp.score:.3f}"
    return f"{comp.name}={measured} (w={comp.weight:.2f}, {comp.contribution:+.3f})"


def one_line_summary(breakdown: ScoreBreakdown) -> str:
    """Render a compact single-line summary for a score breakdown."""
    parts = [f"total={breakdown.total_score:.3f}"]
    parts.extend(format_component(comp) for comp in breakdown.components)
    return " | ".join(parts)
