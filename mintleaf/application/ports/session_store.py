from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mintleaf.application.use_cases.booking_wizard import BookingWizard


class WizardSessionStorePort(ABC):
    @abstractmethod
    def add(self, wizard: "BookingWizard") -> str:
        """Register a wizard and return its new session id."""
        raise NotImplementedError

    @abstractmethod
    def get(self, session_id: str) -> "BookingWizard | None":
        raise NotImplementedError

    @abstractmethod
    def discard(self, session_id: str) -> None:
        raise NotImplementedError
