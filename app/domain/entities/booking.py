from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from app.domain.entities.slot import Slot


@dataclass(frozen=True)
class Booking:
    id: str
    client_name: str
    email: str
    service_id: str
    starts_at: datetime
    ends_at: datetime
    phone: str | None = None
    notes: str | None = None

    @property
    def slot(self) -> Slot:
        return Slot(start=self.starts_at, end=self.ends_at)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.id,
            "clientName": self.client_name,
            "email": self.email,
            "serviceId": self.service_id,
            "startsAt": self.starts_at.isoformat(),
            "endsAt": self.ends_at.isoformat(),
        }
        if self.phone:
            payload["phone"] = self.phone
        if self.notes:
            payload["notes"] = self.notes
        return payload
