from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo

import firebase_admin
from firebase_admin import credentials
from firebase_admin import firestore as fb_firestore
from google.api_core import exceptions as google_exceptions

from mintleaf.application.exceptions import StorageReadError, StorageWriteError
from mintleaf.application.ports.reservation_store import ReservationStorePort
from mintleaf.core.config import settings as app_settings
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

SETTINGS_COLLECTION = "reservation_settings"
UNITS_COLLECTION = "units"
RESERVATIONS_SUBCOLLECTION = "reservations"
LEAVE_REQUESTS_COLLECTION = "requests"

APP_NAME = "mintleaf"


def to_document(value: Any, tz: ZoneInfo) -> Any:
    """Localize naive datetimes so the client writes the right instant."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=tz)
    if isinstance(value, dict):
        return {key: to_document(item, tz) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_document(item, tz) for item in value]
    return value


def from_document(value: Any, tz: ZoneInfo) -> Any:
    """Turn stored timestamps back into naive local wall-clock datetimes."""
    if isinstance(value, datetime):
        aware = value if value.tzinfo else value.replace(tzinfo=timezone.utc)
        local = aware.astimezone(tz).replace(tzinfo=None)
        # the client returns a datetime subclass carrying nanoseconds
        return datetime(
            local.year, local.month, local.day, local.hour, local.minute, local.second, local.microsecond
        )
    if isinstance(value, dict):
        return {key: from_document(item, tz) for key, item in value.items()}
    if isinstance(value, list):
        return [from_document(item, tz) for item in value]
    return value


def _init_firebase_app(project_id: str, credentials_file: str | None) -> firebase_admin.App:
    """Initialize the named Firebase app once; a service account file wins over ADC."""
    try:
        return firebase_admin.get_app(APP_NAME)
    except ValueError:
        pass  # not initialized yet

    if credentials_file:
        cred = credentials.Certificate(credentials_file)
    else:
        cred = credentials.ApplicationDefault()
    return firebase_admin.initialize_app(cred, {"projectId": project_id}, name=APP_NAME)


class FirestoreReservationStore(ReservationStorePort):
    """Reservation data in Cloud Firestore, through the Firebase Admin client."""

    def __init__(
        self,
        project_id: str | None = None,
        database: str | None = None,
        credentials_file: str | None = None,
        timezone_name: str | None = None,
        db: Any = None,
    ) -> None:
        self._tz = ZoneInfo(timezone_name or app_settings.BUSINESS_TIMEZONE)
        self._logger = logging.getLogger(__name__)

        if db is not None:
            self._db = db
            return

        project_id = project_id or app_settings.FIRESTORE_PROJECT_ID
        if not project_id:
            raise ValueError("FIRESTORE_PROJECT_ID is required for the Firestore store")
        app = _init_firebase_app(project_id, credentials_file or app_settings.FIRESTORE_CREDENTIALS_FILE)
        self._db = fb_firestore.client(app=app, database_id=database or app_settings.FIRESTORE_DATABASE)

    def _reservations(self, unit_id: str):
        return self._db.collection(UNITS_COLLECTION).document(unit_id).collection(RESERVATIONS_SUBCOLLECTION)

    def get_settings(self, unit_id: str) -> ReservationSettings:
        try:
            snapshot = self._db.collection(SETTINGS_COLLECTION).document(unit_id).get()
        except google_exceptions.GoogleAPIError as e:
            self._logger.error("Error loading reservation settings", extra={"unit_id": unit_id, "error": str(e)})
            raise StorageReadError(f"Could not load settings for unit {unit_id}") from e

        if not snapshot.exists:
            return ReservationSettings(unit_id=unit_id)
        return settings_from_dict(unit_id, from_document(snapshot.to_dict() or {}, self._tz))

    def save_settings(self, settings: ReservationSettings) -> None:
        document = to_document(settings_to_dict(settings), self._tz)
        try:
            self._db.collection(SETTINGS_COLLECTION).document(settings.unit_id).set(document)
        except google_exceptions.GoogleAPIError as e:
            self._logger.error(
                "Error saving reservation settings", extra={"unit_id": settings.unit_id, "error": str(e)}
            )
            raise StorageWriteError(f"Could not save settings for unit {settings.unit_id}") from e

    def create_reservation(self, reservation: Reservation) -> str:
        reference_code = reservation.reference_code or new_reference_code()
        document = to_document(reservation_to_dict(replace(reservation, reference_code=reference_code)), self._tz)
        try:
            self._reservations(reservation.unit_id).document(reference_code).create(document)
        except google_exceptions.GoogleAPIError as e:
            self._logger.error(
                "Error creating reservation document", extra={"unit_id": reservation.unit_id, "error": str(e)}
            )
            raise StorageWriteError("Could not store the reservation") from e

        self._logger.info(
            "Reservation document created",
            extra={"unit_id": reservation.unit_id, "reference_code": reference_code},
        )
        return reference_code

    def list_reservations(self, unit_id: str) -> list[Reservation]:
        try:
            snapshots = list(self._reservations(unit_id).stream())
        except google_exceptions.GoogleAPIError as e:
            self._logger.error("Error listing reservations", extra={"unit_id": unit_id, "error": str(e)})
            raise StorageReadError(f"Could not list reservations for unit {unit_id}") from e
        return [reservation_from_dict(from_document(s.to_dict() or {}, self._tz)) for s in snapshots]

    def create_leave_requests(self, requests: list[LeaveRequest]) -> list[str]:
        ids = [uuid.uuid4().hex for _ in requests]
        collection = self._db.collection(LEAVE_REQUESTS_COLLECTION)
        batch = self._db.batch()
        for request, request_id in zip(requests, ids):
            batch.create(collection.document(request_id), to_document(leave_request_to_dict(request), self._tz))
        try:
            batch.commit()
        except google_exceptions.GoogleAPIError as e:
            self._logger.error("Error committing leave requests", extra={"error": str(e)})
            raise StorageWriteError("Could not store the leave requests") from e
        return ids

    def list_leave_requests(self, unit_id: str) -> list[LeaveRequest]:
        query = self._db.collection(LEAVE_REQUESTS_COLLECTION).where("unitId", "==", unit_id)
        try:
            snapshots = list(query.stream())
        except google_exceptions.GoogleAPIError as e:
            self._logger.error("Error querying leave requests", extra={"unit_id": unit_id, "error": str(e)})
            raise StorageReadError(f"Could not list leave requests for unit {unit_id}") from e
        return [leave_request_from_dict(from_document(s.to_dict() or {}, self._tz), s.id) for s in snapshots]
