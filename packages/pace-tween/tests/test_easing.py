"""Tests for easing functions."""
import pytest

from pace_tween import EASINGS, get_easing


class TestEndpoints:
    """Every easing maps 0 -> 0 and 1 -> 1."""

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_starts_at_zero(self, name):
        assert EASINGS[name](0.0) == 0.0

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_ends_at_one(self, name):
        assert EASINGS[name](1.0) == 1.0


class TestMidpoints:
    """Known values at t=0.5."""

    def test_linear_at_half(self):
        assert EASINGS["linear"](0.5) == 0.5

    def test_ease_in_at_half(self):
        """Ease-in is t*t."""
        assert EASINGS["ease_in"](0.5) == 0.25

    def test_ease_out_at_half(self):
        """Ease-out is 1-(1-t)^2."""
        assert EASINGS["ease_out"](0.5) == 0.75

    def test_ease_in_out_at_half(self):
        assert EASINGS["ease_in_out"](0.5) == pytest.approx(0.5)

    def test_ease_out_cubic_at_half(self):
        """Ease-out cubic is 1-(1-t)^3."""
        assert EASINGS["ease_out_cubic"](0.5) == pytest.approx(0.875)


class TestEaseOutCubic:
    """The curve used by the stick drop and camera pan."""

    def test_monotonic(self):
        fn = EASINGS["ease_out_cubic"]
        values = [fn(i / 20) for i in range(21)]
        assert values == sorted(values)

    def test_front_loaded(self):
        """Most of the motion happens early."""
        assert EASINGS["ease_out_cubic"](0.25) > 0.5


class TestLookup:
    """Name lookup."""

    def test_known_name(self):
        assert get_easing("ease_in") is EASINGS["ease_in"]

    def test_unknown_name_raises(self):
        with pytest.raises(KeyError, match="bounce"):
            get_easing("bounce")
