from dataclasses import dataclass, field
from typing import Any

from app.domain.entities.booking import Booking


@dataclass(frozen=True)
class AgentReply:
    text: str
    booking: Booking | None = None
    meta: dict[str, Any] = field(default_factory=dict)
