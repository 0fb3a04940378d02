import numpy as np
import pytest

from interpolatable.easing import (
    EASING_FUNCTIONS,
    EasingName,
    ease_in_out_sine,
    ease_in_sine,
    ease_out_sine,
    get_easing,
)

ALL_EASINGS = [ease_in_sine, ease_out_sine, ease_in_out_sine]


@pytest.mark.parametrize("easing", ALL_EASINGS)
def test_easing_boundaries(easing):
    assert float(easing(0.0)) == pytest.approx(0.0, abs=1e-6)
    assert float(easing(1.0)) == pytest.approx(1.0, abs=1e-6)


@pytest.mark.parametrize("easing", [ease_in_sine, ease_out_sine])
def test_easing_monotonic(easing):
    t = np.linspace(0.0, 1.0, 1001)
    values = easing(t)
    assert np.all(np.diff(values) >= 0)


def test_ease_out_sine_midpoint():
    assert float(ease_out_sine(0.5)) == pytest.approx(np.sin(np.pi / 4), abs=1e-6)
    assert float(ease_out_sine(0.5)) == pytest.approx(0.70710678, abs=1e-6)


def test_ease_in_sine_midpoint():
    assert float(ease_in_sine(0.5)) == pytest.approx(1.0 - np.cos(np.pi / 4), abs=1e-6)


def test_ease_in_out_sine_is_symmetric():
    t = np.linspace(0.0, 1.0, 101)
    np.testing.assert_allclose(ease_in_out_sine(t), 1.0 - ease_in_out_sine(1.0 - t), atol=1e-6)
    assert float(ease_in_out_sine(0.5)) == pytest.approx(0.5, abs=1e-6)


@pytest.mark.parametrize("easing", ALL_EASINGS)
def test_easing_returns_float32(easing):
    assert isinstance(easing(0.25), np.float32)
    assert easing(np.array([0.0, 0.5, 1.0])).dtype == np.float32


def test_easing_extrapolates():
    assert float(ease_out_sine(-1.0)) == pytest.approx(-1.0, abs=1e-6)
    assert float(ease_in_sine(2.0)) == pytest.approx(2.0, abs=1e-6)
    assert float(ease_in_out_sine(2.0)) == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize("easing", ALL_EASINGS)
def test_easing_propagates_nan(easing):
    assert np.isnan(easing(np.nan))


def test_array_matches_scalar():
    t = np.array([0.1, 0.3, 0.7])
    values = ease_in_sine(t)
    for i, u in enumerate(t):
        assert float(values[i]) == pytest.approx(float(ease_in_sine(u)), rel=1e-6)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("ease-in-sine", ease_in_sine),
        ("ease-out-sine", ease_out_sine),
        ("ease-in-out-sine", ease_in_out_sine),
        ("EASE_IN_SINE", ease_in_sine),
        ("ease in out sine", ease_in_out_sine),
        ("  Ease-Out_Sine ", ease_out_sine),
        ("in", ease_in_sine),
        ("out", ease_out_sine),
        ("in_out", ease_in_out_sine),
        (EasingName.EASE_IN_OUT_SINE, ease_in_out_sine),
    ],
)
def test_get_easing(name, expected):
    assert get_easing(name) is expected


@pytest.mark.parametrize("name", ["ease-in-quad", "", "sine", None, 3])
def test_get_easing_invalid(name):
    with pytest.raises(ValueError, match="Invalid easing"):
        get_easing(name)


def test_easing_table_covers_every_name():
    assert set(EASING_FUNCTIONS) == set(EasingName)


@pytest.mark.parametrize("easing", ALL_EASINGS)
@pytest.mark.parametrize("t", [0.1, 0.3, 0.7])
def test_easing_rounds_t_to_float32(easing, t):
    assert easing(np.float64(t)) == easing(np.float32(t))
    assert easing(t) == easing(np.float32(t))
