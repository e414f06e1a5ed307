from __future__ import annotations

import re

_PHONE_SEPARATORS = re.compile(r"[\s\-()]")


def normalize_phone(raw: str | None, country_code: str = "+36", trunk_prefix: str = "06") -> str:
    """Best-effort E.164-like shape (+<country><number>). Never raises.

    - 00... international prefix becomes +...
    - domestic trunk prefix (06 in Hungary) becomes the country code
    - anything else without a leading + gets the country code prepended
    Dialability is not checked; that belongs to form validation.
    """
    compact = _PHONE_SEPARATORS.sub("", raw or "")
    if not compact:
        return ""

    if compact.startswith("00"):
        return "+" + compact[2:]

    if trunk_prefix and compact.startswith(trunk_prefix):
        return country_code + compact[len(trunk_prefix):]

    if not compact.startswith("+"):
        return country_code + compact

    return compact


def normalize_email(raw: str | None) -> str:
    return (raw or "").strip().lower()
