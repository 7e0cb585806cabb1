"""
EventRank CLI entrypoint.

Intended for quick local demos and debugging on JSON input files.
It delegates all ranking logic to `eventrank.recommender.recommend.get_recommended_events`.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Any

from eventrank.catalog.loader import load_events, load_similarity, load_user
from eventrank.config.overrides import apply_settings_overrides
from eventrank.config.settings import ScoringWeights, get_settings
from eventrank.core.geo import GeoPoint, haversine_km
from eventrank.core.logging import configure_logging
from eventrank.recommender.recommend import explain_event, get_recommended_events
from eventrank.scoring.explain import one_line_summary

logger = logging.getLogger(__name__)


def _parse_weight_pairs(pairs: list[str]) -> dict[str, float]:
    """Parse `NAME=VALUE` CLI arguments into a scoring-weights override dict."""
    out: dict[str, float] = {}
    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"Invalid --weight '{pair}', expected NAME=VALUE")
        name, value = pair.split("=", 1)
        name = name.strip().lower()
        if name not in ScoringWeights.model_fields:
            allowed = ", ".join(ScoringWeights.model_fields)
            raise ValueError(f"Unknown weight '{name}'; expected one of: {allowed}")
        out[name] = float(value)
    return out


def _cmd_distance(args: argparse.Namespace) -> int:
    """Handle the `distance` subcommand."""
    settings = get_settings()
    a = GeoPoint(lat=args.lat1, lng=args.lng1)
    b = GeoPoint(lat=args.lat2, lng=args.lng2)
    km = haversine_km(a, b, radius_km=settings.geo.earth_radius_km)
    if args.json:
        print(json.dumps({"from": asdict(a), "to": asdict(b), "distance_km": km}))
    else:
        print(f"{km:.3f} km")
    return 0


def _cmd_recommend(args: argparse.Namespace) -> int:
    """Handle the `recommend` subcommand."""
    overrides: dict[str, Any] = {}
    if args.weight:
        overrides = {"scoring": {"weights": _parse_weight_pairs(args.weight)}}
    settings = apply_settings_overrides(get_settings(), overrides)

    user = load_user(args.user)
    events = load_events(args.events)
    similarity = load_similarity(args.similarity)
    logger.info("Loaded %d events from %s", len(events), args.events)

    ranked = get_recommended_events(user, events, similarity, args.limit, settings=settings)

    if args.json:
        payload = [e.model_dump(mode="json", exclude_unset=True) for e in ranked]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    print("Top events:")
    for i, event in enumerate(ranked, start=1):
        label = getattr(event, "title", None) or getattr(event, "name", None) or ""
        print(f"{i:>2}. [{event.id}] {label}  score={event.score:.4f}".rstrip())
        if args.explain:
            breakdown = explain_event(user, event, similarity, settings=settings)
            print(f"    {one_line_summary(breakdown)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the EventRank CLI."""
    parser = argparse.ArgumentParser(prog="eventrank")
    sub = parser.add_subparsers(dest="command", required=True)

    dist = sub.add_parser("distance", help="Great-circle distance (km) between two points.")
    dist.add_argument("lat1", type=float)
    dist.add_argument("lng1", type=float)
    dist.add_argument("lat2", type=float)
    dist.add_argument("lng2", type=float)
    dist.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    dist.set_defaults(func=_cmd_distance)

    rec = sub.add_parser("recommend", help="Rank events for a user.")
    rec.add_argument("--user", required=True, help="JSON file with lat, lng, preferences")
    rec.add_argument("--events", required=True, help="JSON file with an array of events")
    rec.add_argument("--similarity", default=None, help="JSON file mapping event id -> similarity")
    rec.add_argument("--limit", type=int, default=None, help="Max results (default from config)")
    rec.add_argument(
        "--weight", action="append", default=[], help="Override a scoring weight: NAME=VALUE (repeatable)"
    )
    rec.add_argument("--explain", action="store_true", help="Print the per-signal score breakdown")
    rec.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    rec.set_defaults(func=_cmd_recommend)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m eventrank.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    try:
        return int(func(args))
    except (OSError, ValueError) as e:
        # pydantic.ValidationError and json.JSONDecodeError are both ValueErrors.
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
