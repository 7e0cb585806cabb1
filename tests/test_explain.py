from eventrank.recommender.recommend import explain_event
from eventrank.scoring.explain import format_component, one_line_summary

USER = {"lat": 0.0, "lng": 0.0, "preferences": ["music"]}


def test_summary_for_a_nearby_matching_event():
    event = {"id": 1, "lat": 0.0, "lng": 0.0, "categories": "music", "popularity": 1}
    summary = one_line_summary(explain_event(USER, event, {1: 1}))

    assert summary == (
        "total=1.000"
        " | similarity=1.000 (w=0.40, +0.400)"
        " | category=match (w=0.30, +0.300)"
        " | distance=0.0km->1.000 (w=0.20, +0.200)"
        " | popularity=1.000 (w=0.10, +0.100)"
    )


def test_distance_is_shown_in_kilometers():
    event = {"id": 2, "lat": 0.0, "lng": 90.0, "categories": "sports"}
    breakdown = explain_event(USER, event, {})
    distance = next(c for c in breakdown.components if c.name == "distance")
    category = next(c for c in breakdown.components if c.name == "category")

    assert format_component(distance) == "distance=10007.5km->0.000 (w=0.20, +0.000)"
    assert format_component(category) == "category=miss (w=0.30, +0.000)"


def test_negative_similarity_shows_a_negative_contribution():
    event = {"id": 3, "lat": 0.0, "lng": 0.0}
    breakdown = explain_event(USER, event, {3: -0.5})
    similarity = breakdown.components[0]

    assert format_component(similarity) == "similarity=-0.500 (w=0.40, -0.200)"
