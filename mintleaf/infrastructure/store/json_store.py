from __future__ import annotations

import json
import logging
import threading
import uuid
from dataclasses import replace
from datetime import date, datetime
from pathlib import Path
from typing import Any

from mintleaf.application.exceptions import StorageWriteError
from mintleaf.application.ports.reservation_store import ReservationStorePort
from mintleaf.domain.entities.leave_request import LeaveRequest
from mintleaf.domain.entities.reservation import Reservation
from mintleaf.domain.entities.reservation_settings import ReservationSettings
from mintleaf.infrastructure.store.memory_store import new_reference_code
from mintleaf.infrastructure.store.serialization import (
    leave_request_from_dict,
    leave_request_to_dict,
    reservation_from_dict,
    reservation_to_dict,
    settings_from_dict,
    settings_to_dict,
)


def _json_default(value: Any) -> str:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Not JSON serializable: {type(value).__name__}")


class JsonReservationStore(ReservationStorePort):
    """One JSON document per unit, for local development."""

    def __init__(self, data_dir: str = "./data/units") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # Lock for managing locks dict
        self._logger = logging.getLogger(__name__)

    def _get_lock(self, unit_id: str) -> threading.Lock:
        """Get or create a lock for a unit_id."""
        with self._lock_lock:
            if unit_id not in self._locks:
                self._locks[unit_id] = threading.Lock()
            return self._locks[unit_id]

    def _get_file_path(self, unit_id: str) -> Path:
        return self._data_dir / f"{unit_id}.json"

    def _load_unit_data(self, unit_id: str) -> dict[str, Any]:
        """Load unit data from JSON file, return default if missing."""
        file_path = self._get_file_path(unit_id)
        empty = {
            "unit_id": unit_id,
            "settings": None,
            "reservations": [],
            "leave_requests": [],
            "version": 1,
        }
        if not file_path.exists():
            return empty

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            self._logger.warning("Unreadable unit file, using defaults", extra={"unit_id": unit_id, "error": str(e)})
            return empty

        for key, default in empty.items():
            data.setdefault(key, default)
        return data

    def _save_unit_data(self, unit_id: str, data: dict[str, Any]) -> None:
        """Save unit data to JSON file atomically."""
        file_path = self._get_file_path(unit_id)
        temp_path = file_path.with_suffix(".json.tmp")

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False, default=_json_default)
            # Atomic rename
            temp_path.replace(file_path)
        except (OSError, TypeError) as e:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            self._logger.error("Error writing unit file", extra={"unit_id": unit_id, "error": str(e)})
            raise StorageWriteError(f"Could not write data for unit {unit_id}") from e

    def get_settings(self, unit_id: str) -> ReservationSettings:
        with self._get_lock(unit_id):
            data = self._load_unit_data(unit_id)
            return settings_from_dict(unit_id, data.get("settings"))

    def save_settings(self, settings: ReservationSettings) -> None:
        with self._get_lock(settings.unit_id):
            data = self._load_unit_data(settings.unit_id)
            data["settings"] = settings_to_dict(settings)
            self._save_unit_data(settings.unit_id, data)

    def create_reservation(self, reservation: Reservation) -> str:
        reference_code = reservation.reference_code or new_reference_code()
        stored = replace(reservation, reference_code=reference_code)
        with self._get_lock(reservation.unit_id):
            data = self._load_unit_data(reservation.unit_id)
            data["reservations"].append(reservation_to_dict(stored))
            self._save_unit_data(reservation.unit_id, data)
        return reference_code

    def list_reservations(self, unit_id: str) -> list[Reservation]:
        with self._get_lock(unit_id):
            data = self._load_unit_data(unit_id)
            return [reservation_from_dict(item) for item in data["reservations"]]

    def create_leave_requests(self, requests: list[LeaveRequest]) -> list[str]:
        ids = [uuid.uuid4().hex for _ in requests]
        by_unit: dict[str, list[dict[str, Any]]] = {}
        for request, request_id in zip(requests, ids):
            by_unit.setdefault(request.unit_id, []).append({"id": request_id, **leave_request_to_dict(request)})

        for unit_id, documents in by_unit.items():
            with self._get_lock(unit_id):
                data = self._load_unit_data(unit_id)
                data["leave_requests"].extend(documents)
                self._save_unit_data(unit_id, data)
        return ids

    def list_leave_requests(self, unit_id: str) -> list[LeaveRequest]:
        with self._get_lock(unit_id):
            data = self._load_unit_data(unit_id)
            return [leave_request_from_dict(item) for item in data["leave_requests"]]
