from __future__ import annotations

from datetime import datetime

from app.application.ports.intent_strategy import IntentStrategyPort
from app.application.ports.service_catalog import ServiceCatalogPort
from app.application.utils.date_parser import parse_desired_start
from app.application.utils.extraction import (
    conversation_text as user_conversation_text,
    determine_service,
    extract_email,
    extract_name,
    extract_phone,
    user_messages,
)
from app.application.utils.message_rules import (
    asks_about_availability,
    asks_about_bio,
    asks_about_policy,
    asks_for_services,
    contains_location_request,
    has_explicit_price_intent,
    is_booking_request,
    is_greeting,
    is_thanks,
)
from app.domain.entities.intent import BookingExtraction, Intent
from app.domain.entities.message import ChatMessage


class RuleBasedIntentStrategy(IntentStrategyPort):
    """Regex and keyword matching; no learned model involved."""

    def __init__(self, catalog: ServiceCatalogPort, slot_interval_minutes: int = 30) -> None:
        self._catalog = catalog
        self._slot_interval_minutes = slot_interval_minutes

    def extract(self, messages: list[ChatMessage], now: datetime) -> BookingExtraction:
        conversation = user_conversation_text(messages)
        user_side = user_messages(messages)
        latest = user_side[-1].content if user_side else ""

        return BookingExtraction(
            name=extract_name(messages),
            email=extract_email(conversation),
            phone=extract_phone(conversation),
            service=determine_service(conversation, self._catalog.list_services()),
            desired_start=parse_desired_start(latest, now, self._slot_interval_minutes),
        )

    def classify(
        self,
        latest_text: str,
        conversation_text: str,
        extraction: BookingExtraction,
    ) -> Intent:
        if asks_about_availability(latest_text):
            return Intent.availability
        if has_explicit_price_intent(latest_text):
            return Intent.pricing
        if asks_about_bio(latest_text):
            return Intent.bio
        if contains_location_request(latest_text):
            return Intent.location
        if asks_about_policy(latest_text):
            return Intent.policy
        if is_booking_request(conversation_text) or (extraction.service and extraction.desired_start):
            return Intent.booking
        if asks_for_services(latest_text):
            return Intent.services
        if is_thanks(latest_text):
            return Intent.thanks
        if is_greeting(latest_text):
            return Intent.greeting
        return Intent.fallback
