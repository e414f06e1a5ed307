from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_OCCASION_OPTIONS = ("Brunch", "Ebéd", "Vacsora", "Születésnap", "Italozás", "Egyéb")
DEFAULT_HEARD_FROM_OPTIONS = (
    "Google",
    "Facebook / Instagram",
    "Ismerős ajánlása",
    "Sétáltam az utcán",
    "Egyéb",
)

RADIUS_CHOICES = ("sm", "md", "lg")
ELEVATION_CHOICES = ("low", "mid", "high")
TYPOGRAPHY_SCALE_CHOICES = ("S", "M", "L")

THEME_COLOR_ROLES = (
    "primary",
    "surface",
    "background",
    "text_primary",
    "text_secondary",
    "accent",
    "success",
    "danger",
)


@dataclass(frozen=True)
class BookableWindow:
    start: str = "11:00"  # HH:MM
    end: str = "23:00"


@dataclass(frozen=True)
class GuestFormSettings:
    occasion_options: tuple[str, ...] = DEFAULT_OCCASION_OPTIONS
    heard_from_options: tuple[str, ...] = DEFAULT_HEARD_FROM_OPTIONS


@dataclass(frozen=True)
class ThemeConfig:
    primary: str = "#16a34a"
    surface: str = "#ffffff"
    background: str = "#f9fafb"
    text_primary: str = "#1f2937"
    text_secondary: str = "#4b5563"
    accent: str = "#10b981"
    success: str = "#22c55e"
    danger: str = "#ef4444"
    radius: str = "lg"  # "sm", "md", "lg"
    elevation: str = "mid"  # "low", "mid", "high"
    typography_scale: str = "M"  # "S", "M", "L"


@dataclass(frozen=True)
class ReservationSettings:
    unit_id: str
    blackout_dates: frozenset[str] = frozenset()  # DateKeys
    daily_capacity: int | None = None  # informational, not enforced
    bookable_window: BookableWindow | None = field(default_factory=BookableWindow)
    kitchen_open: str | None = None
    bar_close: str | None = None
    guest_form: GuestFormSettings = field(default_factory=GuestFormSettings)
    theme: ThemeConfig = field(default_factory=ThemeConfig)
