from __future__ import annotations

from abc import ABC, abstractmethod

from mintleaf.domain.entities.leave_request import LeaveRequest
from mintleaf.domain.entities.reservation import Reservation
from mintleaf.domain.entities.reservation_settings import ReservationSettings


class ReservationStorePort(ABC):
    @abstractmethod
    def get_settings(self, unit_id: str) -> ReservationSettings:
        """Unit's reservation settings, merged over defaults when partly or not stored."""
        raise NotImplementedError

    @abstractmethod
    def save_settings(self, settings: ReservationSettings) -> None:
        raise NotImplementedError

    @abstractmethod
    def create_reservation(self, reservation: Reservation) -> str:
        """Persist a reservation. Returns its reference code. Raises StorageWriteError."""
        raise NotImplementedError

    @abstractmethod
    def list_reservations(self, unit_id: str) -> list[Reservation]:
        raise NotImplementedError

    @abstractmethod
    def create_leave_requests(self, requests: list[LeaveRequest]) -> list[str]:
        """Persist leave requests as one batch. Returns their ids. Raises StorageWriteError."""
        raise NotImplementedError

    @abstractmethod
    def list_leave_requests(self, unit_id: str) -> list[LeaveRequest]:
        raise NotImplementedError
