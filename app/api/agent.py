from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, Query, Request

from app.api.schemas import (
    AgentRequestSchema,
    AgentResponseSchema,
    AvailableSlotSchema,
    BookingSchema,
    ServiceSchema,
)
from app.application.exceptions import AgentRequestError, InvalidPayloadError
from app.application.ports.service_catalog import ServiceCatalogPort
from app.application.use_cases.availability import AvailabilityUseCase
from app.application.use_cases.handle_agent_message import HandleAgentMessageUseCase
from app.domain.entities.message import ChatMessage
from app.domain.entities.reply import AgentReply
from app.wiring.dependencies import (
    business_now,
    get_availability_use_case,
    get_handle_agent_message_use_case,
    get_service_catalog,
)


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/agent", response_model=AgentResponseSchema, response_model_exclude_none=True)
async def agent(
    request: Request,
    use_case: HandleAgentMessageUseCase = Depends(get_handle_agent_message_use_case),
) -> AgentResponseSchema:
    # Always 200: failures are reported in the reply text and metadata.
    body = await request.body()
    try:
        payload = json.loads(body.decode("utf-8")) if body else None
        req = AgentRequestSchema.model_validate(payload)
    except ValueError:
        logger.info("Malformed agent payload")
        return _to_response(use_case.reject(InvalidPayloadError()))

    messages = [ChatMessage(role=m.role, content=m.content) for m in req.messages]
    try:
        reply = use_case.handle(messages)
    except AgentRequestError as e:
        reply = use_case.reject(e)

    return _to_response(reply)


@router.get("/services", response_model=list[ServiceSchema])
def list_services(catalog: ServiceCatalogPort = Depends(get_service_catalog)) -> list[ServiceSchema]:
    return [
        ServiceSchema(
            id=s.id,
            name=s.name,
            description=s.description,
            durationMinutes=s.duration_minutes,
            price=s.price,
            keywords=list(s.keywords),
        )
        for s in catalog.list_services()
    ]


@router.get("/availability", response_model=list[AvailableSlotSchema])
def availability(
    count: int = Query(6, ge=1, le=50),
    use_case: AvailabilityUseCase = Depends(get_availability_use_case),
) -> list[AvailableSlotSchema]:
    slots = use_case.get_next_available_slots(business_now(), count)
    return [AvailableSlotSchema(formatted=slot.formatted, startsAt=slot.starts_at) for slot in slots]


def _to_response(reply: AgentReply) -> AgentResponseSchema:
    return AgentResponseSchema(
        reply=reply.text,
        booking=BookingSchema(**reply.booking.to_payload()) if reply.booking else None,
        metadata=reply.meta or None,
    )
