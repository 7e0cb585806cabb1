from __future__ import annotations

import pytest

from eventrank.config.overrides import apply_settings_overrides
from eventrank.config.settings import get_settings


def test_apply_settings_overrides_returns_same_object_when_none():
    settings = get_settings()

    # No overrides is a no-op fast path: the same (cached) object comes back.
    assert apply_settings_overrides(settings, None) is settings
    assert apply_settings_overrides(settings, {}) is settings


def test_apply_settings_overrides_can_override_scoring_weights():
    settings = get_settings()

    out = apply_settings_overrides(settings, {"scoring": {"weights": {"distance": 0.5}}})

    assert out.scoring.weights.distance == 0.5
    # Untouched siblings keep their configured values.
    assert out.scoring.weights.similarity == settings.scoring.weights.similarity
    # The shared cached settings must not change (no cross-run leakage).
    assert settings.scoring.weights.distance == 0.2


def test_apply_settings_overrides_rejects_disallowed_keys_with_clear_path():
    settings = get_settings()

    with pytest.raises(ValueError, match=r"disallowed key: 'geo'"):
        apply_settings_overrides(settings, {"geo": {"earth_radius_km": 1}})

    with pytest.raises(ValueError, match=r"scoring\.bonus"):
        apply_settings_overrides(settings, {"scoring": {"bonus": 1}})


def test_apply_settings_overrides_rejects_wrong_value_shapes_for_restricted_subtrees():
    settings = get_settings()

    with pytest.raises(ValueError, match=r"settings_overrides key 'scoring' must be a mapping"):
        apply_settings_overrides(settings, {"scoring": 1})


def test_apply_settings_overrides_revalidates_values():
    settings = get_settings()

    # Negative weights fail Pydantic validation (ValidationError is a ValueError).
    with pytest.raises(ValueError):
        apply_settings_overrides(settings, {"scoring": {"weights": {"popularity": -1}}})


def test_apply_settings_overrides_rejects_misspelled_weight_names():
    settings = get_settings()

    with pytest.raises(ValueError, match=r"popularty"):
        apply_settings_overrides(settings, {"scoring": {"weights": {"popularty": 5}}})
    with pytest.raises(ValueError, match=r"top_n"):
        apply_settings_overrides(settings, {"scoring": {"weights": {"top_n": 3}}})
