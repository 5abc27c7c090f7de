from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from app.domain.entities.intent import BookingExtraction, Intent
from app.domain.entities.message import ChatMessage


class IntentStrategyPort(ABC):
    @abstractmethod
    def extract(self, messages: list[ChatMessage], now: datetime) -> BookingExtraction:
        """
        Derive booking fields from the whole transcript.

        Contact details and service come from every user message; the desired
        start is read from the latest user message only, relative to `now`.
        """
        raise NotImplementedError

    @abstractmethod
    def classify(
        self,
        latest_text: str,
        conversation_text: str,
        extraction: BookingExtraction,
    ) -> Intent:
        """Classify the latest user message into a single intent."""
        raise NotImplementedError
