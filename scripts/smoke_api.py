#!/usr/bin/env python3
"""Smoke test for a running reservation API (uvicorn mintleaf.main:app)."""

import os
import sys
from datetime import date, timedelta

import httpx

BASE_URL = os.getenv("MINTLEAF_BASE_URL", "http://127.0.0.1:8000")
UNIT_ID = os.getenv("MINTLEAF_UNIT_ID", "smoke_unit")


def _section(title: str) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def check_calendar(client: httpx.Client) -> bool:
    """Fetch the guest calendar for the current month."""
    _section(f"GET /api/v1/units/{UNIT_ID}/calendar")
    today = date.today()
    try:
        response = client.get(
            f"/api/v1/units/{UNIT_ID}/calendar",
            params={"year": today.year, "month": today.month},
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return False

    days = response.json()["days"]
    selectable = sum(1 for d in days if d["selectable"])
    print(f"✅ {len(days)} cells, {selectable} selectable days")
    return True


def check_booking(client: httpx.Client) -> bool:
    """Run one booking through the wizard endpoints."""
    _section("Booking session flow")
    day = (date.today() + timedelta(days=14)).isoformat()
    try:
        session = client.post(f"/api/v1/units/{UNIT_ID}/booking-sessions")
        session.raise_for_status()
        session_id = session.json()["session_id"]
        print(f"Session: {session_id}")

        client.post(f"/api/v1/booking-sessions/{session_id}/day", json={"date": day}).raise_for_status()
        client.patch(
            f"/api/v1/booking-sessions/{session_id}/details",
            json={
                "name": "Smoke Test",
                "headcount": "2",
                "phone": "06 30 000 0000",
                "email": "smoke@example.com",
                "start_time": "18:00",
            },
        ).raise_for_status()
        result = client.post(f"/api/v1/booking-sessions/{session_id}/submit")
        result.raise_for_status()
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return False

    print(f"✅ Booked {day}, reference {result.json()['reference_code']}")
    return True


def check_theme(client: httpx.Client) -> bool:
    """Review the stored theme's contrast."""
    _section(f"GET /api/v1/units/{UNIT_ID}/theme/contrast")
    try:
        response = client.get(f"/api/v1/units/{UNIT_ID}/theme/contrast")
        response.raise_for_status()
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return False

    for check in response.json()["checks"]:
        marker = "⚠️ " if check["low_contrast"] else "  "
        print(f"{marker}{check['pair']}: {check['ratio']:.2f}")
    return True


def main() -> int:
    with httpx.Client(base_url=BASE_URL, timeout=10.0) as client:
        results = [check_calendar(client), check_booking(client), check_theme(client)]

    _section("Summary")
    print(f"{sum(results)}/{len(results)} checks passed")
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
