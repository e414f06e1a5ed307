"""
Tests for WCAG contrast ratios and theme review.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from mintleaf.application.exceptions import InvalidColorError
from mintleaf.application.use_cases.theme_review import contrast_warnings, review_theme
from mintleaf.application.utils.contrast import contrast_ratio, parse_hex_color, relative_luminance
from mintleaf.domain.entities.reservation_settings import ThemeConfig


def test_black_on_white_is_21():
    assert contrast_ratio("#FFFFFF", "#000000") == pytest.approx(21.0)


def test_same_color_is_1():
    assert contrast_ratio("#FFFFFF", "#FFFFFF") == pytest.approx(1.0)
    assert contrast_ratio("#16a34a", "#16A34A") == pytest.approx(1.0)


def test_ratio_is_symmetric():
    assert contrast_ratio("#1f2937", "#f9fafb") == pytest.approx(contrast_ratio("#f9fafb", "#1f2937"))


def test_known_grey_on_white():
    # #777777 on white is the classic just-below-AA example
    assert contrast_ratio("#777777", "#ffffff") == pytest.approx(4.48, abs=0.01)


def test_luminance_extremes():
    assert relative_luminance("#000000") == 0.0
    assert relative_luminance("#ffffff") == pytest.approx(1.0)


def test_parse_hex_color():
    assert parse_hex_color("#16a34a") == (0x16, 0xA3, 0x4A)


@pytest.mark.parametrize("color", ["#fff", "white", "FFFFFF", "#GGGGGG", "#ffffff00", "", None])
def test_only_six_digit_hex_is_accepted(color):
    with pytest.raises(InvalidColorError):
        parse_hex_color(color)


def test_default_theme_flags_white_label_on_primary():
    assert contrast_warnings(ThemeConfig()) == ["primary/button_label"]


def test_darker_primary_clears_warnings():
    assert contrast_warnings(replace(ThemeConfig(), primary="#166534")) == []


def test_threshold_is_caller_policy():
    assert contrast_warnings(ThemeConfig(), threshold=3.0) == []


def test_review_reports_raw_ratios():
    checks = {c.pair: c for c in review_theme(ThemeConfig())}
    assert set(checks) == {"surface/text_primary", "background/text_primary", "primary/button_label"}
    assert checks["primary/button_label"].ratio == pytest.approx(3.30, abs=0.01)
    assert checks["primary/button_label"].foreground == "#ffffff"
    assert not checks["surface/text_primary"].low_contrast


def test_malformed_theme_color_names_the_role():
    with pytest.raises(InvalidColorError, match="accent"):
        review_theme(replace(ThemeConfig(), accent="green"))
