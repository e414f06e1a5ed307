from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from datetime import date, datetime

from mintleaf.application.exceptions import ValidationError
from mintleaf.application.ports.reservation_store import ReservationStorePort
from mintleaf.application.utils.date_key import iter_days, to_key
from mintleaf.application.utils.range_consolidator import consolidate_ranges
from mintleaf.domain.entities.calendar import DateRangeBlock
from mintleaf.domain.entities.leave_request import LeaveRequest


@dataclass(frozen=True)
class LeaveSubmission:
    blocks: list[DateRangeBlock]
    requests: list[LeaveRequest]


def requests_by_date(requests: Iterable[LeaveRequest]) -> dict[str, list[LeaveRequest]]:
    """Index requests by every DateKey they cover."""
    index: dict[str, list[LeaveRequest]] = {}
    for request in requests:
        for day in iter_days(request.start_date, request.end_date):
            index.setdefault(to_key(day), []).append(request)
    return index


class SubmitLeaveRequestUseCase:
    def __init__(
        self,
        store: ReservationStorePort,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._store = store
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def execute(
        self,
        unit_id: str,
        user_id: str,
        user_name: str,
        selected_dates: Sequence[date | datetime | str],
        note: str = "",
    ) -> LeaveSubmission:
        """Consolidate the picked days and store one pending request per contiguous block.

        Raises ValidationError when nothing was picked, StorageWriteError when the batch fails.
        """
        blocks = consolidate_ranges(selected_dates)
        if not blocks:
            raise ValidationError("dates", "Select at least one day in the calendar.")

        created_at = self._clock()
        requests = [
            LeaveRequest(
                unit_id=unit_id,
                user_id=user_id,
                user_name=user_name,
                start_date=block.start_date,
                end_date=block.end_date,
                created_at=created_at,
                note=note.strip(),
            )
            for block in blocks
        ]
        ids = self._store.create_leave_requests(requests)
        stored = [replace(request, id=request_id) for request, request_id in zip(requests, ids)]

        self._logger.info(
            "Leave requests created",
            extra={"unit_id": unit_id, "user_id": user_id, "blocks": len(blocks)},
        )
        return LeaveSubmission(blocks=blocks, requests=stored)
