import logging

from fastapi import FastAPI

from app.api.agent import router as agent_router
from app.core.config import settings


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("intent", "service", "booking_id", "starts_at", "reason"):
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

app = FastAPI(title=f"{settings.BUSINESS_NAME} Booking Assistant", version="1.0.0")

app.include_router(agent_router, tags=["agent"])
# Path the chat widget posts to.
app.include_router(agent_router, prefix="/api", tags=["agent"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
