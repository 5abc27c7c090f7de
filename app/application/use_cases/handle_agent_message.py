from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from app.application.exceptions import AgentRequestError, EmptyConversationError
from app.application.ports.intent_strategy import IntentStrategyPort
from app.application.ports.service_catalog import ServiceCatalogPort
from app.application.use_cases.availability import AvailabilityUseCase
from app.application.use_cases.reply_composer import ReplyComposer
from app.application.use_cases.reservation import ReservationUseCase
from app.application.utils.extraction import conversation_text, user_messages
from app.domain.entities.intent import BookingExtraction, Intent
from app.domain.entities.message import ChatMessage
from app.domain.entities.reply import AgentReply
from app.domain.entities.slot import AvailableSlot


class HandleAgentMessageUseCase:
    """
    Answers one chat request. The whole transcript arrives with every call and
    nothing about the conversation is kept between calls.
    """

    def __init__(
        self,
        intent_strategy: IntentStrategyPort,
        reservation: ReservationUseCase,
        availability: AvailabilityUseCase,
        catalog: ServiceCatalogPort,
        composer: ReplyComposer,
        clock: Callable[[], datetime],
        availability_count: int = 5,
    ) -> None:
        self._intent_strategy = intent_strategy
        self._reservation = reservation
        self._availability = availability
        self._catalog = catalog
        self._composer = composer
        self._clock = clock
        self._availability_count = availability_count
        self._logger = logging.getLogger(__name__)

    def handle(self, messages: list[ChatMessage]) -> AgentReply:
        user_side = user_messages(messages)
        if not user_side:
            raise EmptyConversationError("Conversation has no user message")

        now = self._clock()
        latest = user_side[-1].content
        extraction = self._intent_strategy.extract(messages, now)
        intent = self._intent_strategy.classify(latest, conversation_text(messages), extraction)

        self._logger.info(
            "Agent message classified",
            extra={"intent": intent.value, "service": extraction.service.id if extraction.service else None},
        )

        if intent is Intent.booking:
            return self._handle_booking(extraction, now)

        services = self._catalog.list_services()
        replies = {
            Intent.availability: lambda: self._composer.availability(self._next_slots(now)),
            Intent.pricing: lambda: self._composer.pricing(services),
            Intent.bio: self._composer.bio,
            Intent.location: self._composer.location,
            Intent.policy: self._composer.policy,
            Intent.services: lambda: self._composer.services(services),
            Intent.thanks: self._composer.thanks,
            Intent.greeting: self._composer.greeting,
        }
        build = replies.get(intent, self._composer.fallback)
        return AgentReply(text=build(), meta={"intent": intent.value})

    def reject(self, error: AgentRequestError) -> AgentReply:
        """Fallback reply for a request that never reached classification."""
        self._logger.info("Agent request rejected", extra={"reason": error.reason})
        return AgentReply(text=self._composer.fallback(), meta={"reason": error.reason})

    def _handle_booking(self, extraction: BookingExtraction, now: datetime) -> AgentReply:
        missing = extraction.missing_fields()
        if missing:
            return AgentReply(
                text=self._composer.missing_booking_fields(extraction),
                meta={"intent": Intent.booking.value, "missing": missing},
            )

        result = self._reservation.reserve_booking(
            client_name=extraction.name,
            email=extraction.email,
            phone=extraction.phone,
            service_id=extraction.service.id,
            starts_at=extraction.desired_start,
        )

        if not result.ok:
            return AgentReply(
                text=self._composer.booking_failed(result.error, self._next_slots(now)),
                meta={"intent": Intent.booking.value, "reason": result.failure.value},
            )

        return AgentReply(
            text=self._composer.booking_confirmed(result.booking, extraction.service),
            booking=result.booking,
            meta={"intent": "booking.confirmed"},
        )

    def _next_slots(self, now: datetime) -> list[AvailableSlot]:
        return self._availability.get_next_available_slots(now, self._availability_count)
