from __future__ import annotations

from app.application.utils.schedule import format_clock, format_display
from app.domain.entities.booking import Booking
from app.domain.entities.intent import BookingExtraction
from app.domain.entities.service import Service
from app.domain.entities.slot import AvailableSlot

MISSING_FIELD_PROMPTS = {
    "service": "which service you'd like",
    "date": "the date and time that work",
    "name": "your name",
    "email": "an email for confirmation",
}


class ReplyComposer:
    def __init__(self, business_name: str = "Sasha K", artist_name: str = "Sasha") -> None:
        self._business_name = business_name
        self._artist_name = artist_name

    def fallback(self) -> str:
        return (
            f"I'm {self._business_name}'s beauty booking assistant. I can help with availability, "
            "pricing, and locking in sessions. Let me know what you'd like to do!"
        )

    def greeting(self) -> str:
        return (
            f"Hi! I'm {self._business_name}'s booking assistant. I can guide you through services, "
            "pricing, and availability, and I can book you in when you're ready."
        )

    def thanks(self) -> str:
        return "You're so welcome! Let me know if you need anything else."

    def bio(self) -> str:
        return (
            f"{self._business_name} is a NYC-based makeup artist specializing in modern, luminous glam "
            "for red carpet, brides, and editorial. With over 8 years of experience, "
            f"{self._artist_name}'s kit is cruelty-free and curated with luxury and clean beauty staples."
        )

    def location(self) -> str:
        return (
            f"{self._artist_name} works from a private studio in SoHo, Manhattan, and travels within the "
            "tri-state area for on-location bookings. Travel fees apply outside Manhattan."
        )

    def policy(self) -> str:
        return (
            "Bookings require a 25% retainer (applied to your total) and 48 hours' notice for reschedules. "
            "Travel, assistants, or early-call fees are quoted case-by-case."
        )

    def pricing(self, services: list[Service]) -> str:
        return (
            f"Here's {self._artist_name}'s current menu:\n{describe_services(services)}\n\n"
            "Let me know what you'd like to book or if you need a custom quote."
        )

    def services(self, services: list[Service]) -> str:
        return f"{self._artist_name} currently offers:\n{describe_services(services)}"

    def availability(self, slots: list[AvailableSlot]) -> str:
        if not slots:
            return (
                "I'm fully committed over the next three weeks. "
                "Want me to waitlist you or suggest the next opening?"
            )
        bullets = "\n".join(f"- {slot.formatted}" for slot in slots)
        return (
            f"Here are the next open studio slots with {self._artist_name}:\n{bullets}\n"
            "Let me know which one you'd like to claim or if you need a different time."
        )

    def missing_booking_fields(self, extraction: BookingExtraction) -> str:
        needed = join_with_and([MISSING_FIELD_PROMPTS[field] for field in extraction.missing_fields()])
        return f"I'd love to schedule that; could you share {needed}?"

    def booking_confirmed(self, booking: Booking, service: Service) -> str:
        return (
            f"Beautiful! I've booked you for {service.name} on {format_display(booking.starts_at)}, "
            f"wrapping at {format_clock(booking.ends_at)}. You'll get a confirmation at {booking.email}. "
            f"Let me know if you need to tweak anything or add notes for {self._artist_name}."
        )

    def booking_failed(self, error: str, slots: list[AvailableSlot]) -> str:
        return f"{error}\n\n{self.availability(slots)}"


def describe_services(services: list[Service]) -> str:
    return "\n".join(
        f"- {service.name}: ${service.price} | {service.duration_minutes} mins | {service.description}"
        for service in services
    )


def join_with_and(parts: list[str]) -> str:
    """'a' / 'a, and b' / 'a, b, and c'"""
    if len(parts) <= 1:
        return "".join(parts)
    return ", ".join(parts[:-1]) + ", and " + parts[-1]
