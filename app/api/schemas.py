from typing import Any, Literal

from pydantic import BaseModel, Field


class ChatMessageSchema(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str


class AgentRequestSchema(BaseModel):
    messages: list[ChatMessageSchema]


class BookingSchema(BaseModel):
    id: str
    clientName: str
    email: str
    phone: str | None = None
    serviceId: str
    startsAt: str
    endsAt: str
    notes: str | None = None


class AgentResponseSchema(BaseModel):
    reply: str
    booking: BookingSchema | None = None
    metadata: dict[str, Any] | None = None


class ServiceSchema(BaseModel):
    id: str
    name: str
    description: str
    durationMinutes: int
    price: int
    keywords: list[str] = Field(default_factory=list)


class AvailableSlotSchema(BaseModel):
    formatted: str
    startsAt: str
