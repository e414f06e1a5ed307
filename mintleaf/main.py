import logging

from fastapi import FastAPI

from mintleaf.api.v1.admin import router as admin_router
from mintleaf.api.v1.booking import router as booking_router
from mintleaf.api.v1.leave_requests import router as leave_requests_router
from mintleaf.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("unit_id", "session_id", "day", "step", "field", "reference_code", "user_id", "blocks", "blacked_out", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=f"{settings.BUSINESS_NAME} Reservations", version="1.0.0")

app.include_router(booking_router, prefix="/api/v1", tags=["booking"])
app.include_router(admin_router, prefix="/api/v1", tags=["admin"])
app.include_router(leave_requests_router, prefix="/api/v1", tags=["leave-requests"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
