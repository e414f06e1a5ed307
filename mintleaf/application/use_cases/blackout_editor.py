from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime

from mintleaf.application.ports.reservation_store import ReservationStorePort
from mintleaf.application.utils.availability import toggle_blackout
from mintleaf.application.utils.date_key import to_date, to_key
from mintleaf.domain.entities.reservation_settings import ReservationSettings


class BlackoutEditorUseCase:
    """Admin toggle of blackout days. Past days may be toggled too."""

    def __init__(self, store: ReservationStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def toggle(self, unit_id: str, day: date | datetime | str) -> ReservationSettings:
        key = to_key(to_date(day))
        current = self._store.get_settings(unit_id)
        updated = replace(current, blackout_dates=toggle_blackout(current.blackout_dates, key))
        self._store.save_settings(updated)
        self._logger.info(
            "Blackout day toggled",
            extra={"unit_id": unit_id, "day": key, "blacked_out": key in updated.blackout_dates},
        )
        return updated
