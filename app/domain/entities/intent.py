from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from app.domain.entities.service import Service


class Intent(str, Enum):
    availability = "availability"
    pricing = "pricing"
    bio = "bio"
    location = "location"
    policy = "policy"
    booking = "booking"
    services = "services"
    thanks = "thanks"
    greeting = "greeting"
    fallback = "fallback"


@dataclass(frozen=True)
class BookingExtraction:
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    service: Service | None = None
    desired_start: datetime | None = None

    def missing_fields(self) -> list[str]:
        missing: list[str] = []
        if self.service is None:
            missing.append("service")
        if self.desired_start is None:
            missing.append("date")
        if not self.name:
            missing.append("name")
        if not self.email:
            missing.append("email")
        return missing
