from __future__ import annotations

from dataclasses import dataclass

from mintleaf.application.exceptions import InvalidColorError
from mintleaf.application.utils.contrast import AA_BODY_TEXT_RATIO, contrast_ratio, parse_hex_color
from mintleaf.domain.entities.reservation_settings import THEME_COLOR_ROLES, ThemeConfig

BUTTON_LABEL_COLOR = "#ffffff"

# (label, background role, foreground role or literal color)
CHECKED_PAIRS = (
    ("surface/text_primary", "surface", "text_primary"),
    ("background/text_primary", "background", "text_primary"),
    ("primary/button_label", "primary", BUTTON_LABEL_COLOR),
)


@dataclass(frozen=True)
class ContrastCheck:
    pair: str
    background: str
    foreground: str
    ratio: float
    low_contrast: bool


def validate_theme_colors(theme: ThemeConfig) -> None:
    """Raise InvalidColorError naming the first malformed color role."""
    for role in THEME_COLOR_ROLES:
        try:
            parse_hex_color(getattr(theme, role))
        except InvalidColorError as e:
            raise InvalidColorError(f"{role}: {e}") from e


def review_theme(theme: ThemeConfig, threshold: float = AA_BODY_TEXT_RATIO) -> list[ContrastCheck]:
    """Contrast of each color pair the booking page renders; low_contrast below threshold."""
    validate_theme_colors(theme)
    checks: list[ContrastCheck] = []
    for label, background_role, foreground in CHECKED_PAIRS:
        background = getattr(theme, background_role)
        foreground_color = getattr(theme, foreground) if foreground in THEME_COLOR_ROLES else foreground
        ratio = contrast_ratio(background, foreground_color)
        checks.append(
            ContrastCheck(
                pair=label,
                background=background,
                foreground=foreground_color,
                ratio=ratio,
                low_contrast=ratio < threshold,
            )
        )
    return checks


def contrast_warnings(theme: ThemeConfig, threshold: float = AA_BODY_TEXT_RATIO) -> list[str]:
    return [check.pair for check in review_theme(theme, threshold) if check.low_contrast]
