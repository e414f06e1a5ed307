#!/usr/bin/env python3
"""
Interactive local booking harness (no HTTP).

Usage:
  python3 scripts/book_local.py [unit_id]

What it does:
- Builds a BookingWizard through the same wiring the API uses
- Prints the guest calendar for a month, with unavailable days marked
- Walks through day selection, details and submission
"""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

load_dotenv()

from mintleaf.application.exceptions import InvalidDateError
from mintleaf.application.use_cases.booking_wizard import EDITABLE_FIELDS, BookingWizard, WizardResult
from mintleaf.application.utils.calendar_grid import shift_month
from mintleaf.domain.entities.booking_draft import WizardStep
from mintleaf.wiring.dependencies import get_calendar_views, new_booking_wizard

WEEKDAYS = "Mo Tu We Th Fr Sa Su"


def _print_header(unit_id: str) -> None:
    print("\nLocal Booking Harness")
    print("-" * 60)
    print(f"unit_id: {unit_id}")
    print("Commands: /day YYYY-MM-DD, /set field=value, /submit, /back, /reset")
    print("          /next, /prev (calendar month), /draft, /quit, /help")
    print("-" * 60)


def _print_month(unit_id: str, year: int, month: int) -> None:
    days = get_calendar_views().guest_month(unit_id, year, month)
    print(f"\n{year}-{month:02d}")
    print(WEEKDAYS)
    for week in range(0, len(days), 7):
        cells = []
        for day in days[week : week + 7]:
            if day.date is None:
                cells.append("  ")
            elif not day.selectable:
                cells.append("--")
            else:
                cells.append(f"{day.date.day:2d}")
        print(" ".join(cells))


def _print_result(result: WizardResult) -> None:
    print(f"[{result.action}] step={result.step.value}")
    for field, message in result.errors.items():
        print(f"  {field}: {message}")
    if result.message:
        print(f"  {result.message}")
    if result.reference_code:
        print(f"  reference: {result.reference_code}")


def _print_draft(wizard: BookingWizard) -> None:
    draft = wizard.draft
    print(f"day: {draft.day or '-'}")
    for field in EDITABLE_FIELDS:
        print(f"{field}: {getattr(draft, field) or '-'}")


def main() -> None:
    unit_id = sys.argv[1] if len(sys.argv) > 1 else "local_unit"
    wizard = new_booking_wizard(unit_id)
    today = date.today()
    year, month = today.year, today.month

    _print_header(unit_id)
    _print_month(unit_id, year, month)

    while True:
        try:
            line = input(f"\n({wizard.step.value}) > ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not line:
            continue

        cmd, _, arg = line.partition(" ")
        cmd = cmd.lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            _print_header(unit_id)
            print(f"Fields: {', '.join(EDITABLE_FIELDS)}")
            continue
        if cmd in ("/next", "/prev"):
            year, month = shift_month(year, month, 1 if cmd == "/next" else -1)
            _print_month(unit_id, year, month)
            continue
        if cmd == "/draft":
            _print_draft(wizard)
            continue
        if cmd == "/day":
            try:
                _print_result(wizard.select_day(arg.strip()))
            except InvalidDateError as e:
                print(f"ERROR: {e}")
            continue
        if cmd == "/set":
            field, sep, value = arg.partition("=")
            if not sep:
                print("Usage: /set field=value")
                continue
            try:
                _print_result(wizard.update_details(**{field.strip(): value.strip()}))
            except ValueError as e:
                print(f"ERROR: {e}")
            continue
        if cmd == "/submit":
            _print_result(wizard.submit())
            continue
        if cmd == "/back":
            _print_result(wizard.back())
            continue
        if cmd == "/reset":
            _print_result(wizard.reset())
            if wizard.step == WizardStep.selecting_date:
                _print_month(unit_id, year, month)
            continue

        print("Unknown command, try /help")


if __name__ == "__main__":
    main()
