from __future__ import annotations

import re

from mintleaf.application.exceptions import InvalidColorError

_HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")

# WCAG 2.x constants
_LINEAR_KNEE = 0.03928
_LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

AA_BODY_TEXT_RATIO = 4.5


def parse_hex_color(color: str) -> tuple[int, int, int]:
    """Parse a strict #RRGGBB string into channel bytes."""
    match = _HEX_COLOR.match(color) if isinstance(color, str) else None
    if not match:
        raise InvalidColorError(f"Expected #RRGGBB, got {color!r}")
    return (int(match.group(1), 16), int(match.group(2), 16), int(match.group(3), 16))


def _linearize(channel: int) -> float:
    c = channel / 255
    if c <= _LINEAR_KNEE:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    r, g, b = (_linearize(c) for c in parse_hex_color(color))
    wr, wg, wb = _LUMINANCE_WEIGHTS
    return wr * r + wg * g + wb * b


def contrast_ratio(color_a: str, color_b: str) -> float:
    """WCAG contrast ratio between two colors, from 1.0 to 21.0. Order does not matter."""
    lum_a = relative_luminance(color_a)
    lum_b = relative_luminance(color_b)
    lighter, darker = max(lum_a, lum_b), min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)
