from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from squiggle.display.color import Color
from squiggle.progress.colors import (DISABLED_ALPHA, derive_color_state,
                                      normalize_alpha)


class TestDeriveColorState:
    """The wave and remainder colors always derive from one tint and alpha."""

    def test_opaque_white(self) -> None:
        """Verify the remainder line is dimmed to the disabled alpha."""
        colors = derive_color_state(Color.white(), 255)

        assert colors.active == Color(255, 255, 255, 255)
        assert colors.inactive == Color(255, 255, 255, DISABLED_ALPHA)

    def test_alpha_scales_both_colors(self) -> None:
        """Verify halving the alpha halves both derived alphas."""
        colors = derive_color_state(Color(10, 20, 30), 128)

        assert colors.active.rgb() == (10, 20, 30)
        assert colors.active.a == 128
        assert colors.inactive.a == round(DISABLED_ALPHA * 128 / 255)

    @given(alpha=st.floats(allow_nan=True, allow_infinity=True))
    def test_alpha_is_always_in_range(self, alpha: float) -> None:
        """Verify any input alpha produces valid channel values."""
        colors = derive_color_state(Color.white(), alpha)

        assert 0 <= colors.inactive.a <= colors.active.a <= 255


class TestNormalizeAlpha:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(-5.0, 0), (300.0, 255), (127.6, 128), (math.nan, 255), (math.inf, 255)],
        ids=["negative", "too-large", "rounds", "nan", "inf"],
    )
    def test_clamps(self, value: float, expected: int) -> None:
        assert normalize_alpha(value) == expected
