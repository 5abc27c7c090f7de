from __future__ import annotations

import re

AVAILABILITY_KEYWORDS = (
    "availability",
    "available times",
    "available slots",
    "openings",
    "next opening",
)

PRICE_KEYWORDS = (
    "price",
    "pricing",
    "cost",
    "how much",
    "rates",
    "menu",
)

BIO_KEYWORDS = (
    "bio",
    "who is",
    "about you",
    "background",
)

LOCATION_KEYWORDS = (
    "where",
    "studio",
    "location",
    "address",
)

POLICY_KEYWORDS = (
    "policy",
    "policies",
    "retainer",
    "deposit",
)

BOOKING_VERBS = (
    "book",
    "schedule",
    "reserve",
    "appointment",
)

SERVICE_LIST_KEYWORDS = (
    "services",
    "what do you offer",
    "offerings",
)

THANKS_KEYWORDS = (
    "thanks",
    "thank you",
    "thx",
)

GREETING_WORDS = {"hi", "hello", "hey", "hiya"}


def normalize_text(text: str) -> str:
    normalized = text.lower().replace("+", " ")
    normalized = re.sub(r"[^a-z0-9\s]", " ", normalized)
    normalized = re.sub(r"\s+", " ", normalized).strip()
    return normalized


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def asks_about_availability(text: str) -> bool:
    return _contains_any(text, AVAILABILITY_KEYWORDS)


def has_explicit_price_intent(text: str) -> bool:
    """
    Check if user explicitly asks about price, cost, or "how much".
    """
    return _contains_any(text, PRICE_KEYWORDS)


def asks_about_bio(text: str) -> bool:
    return _contains_any(text, BIO_KEYWORDS)


def contains_location_request(text: str) -> bool:
    return _contains_any(text, LOCATION_KEYWORDS)


def asks_about_policy(text: str) -> bool:
    return _contains_any(text, POLICY_KEYWORDS)


def is_booking_request(conversation_text: str) -> bool:
    """
    Check if any user message so far uses a booking verb.
    Runs over the whole conversation, so an earlier "I want to book" keeps the
    booking flow alive while the client supplies the remaining details.
    """
    return _contains_any(conversation_text, BOOKING_VERBS)


def asks_for_services(text: str) -> bool:
    return _contains_any(text, SERVICE_LIST_KEYWORDS)


def is_thanks(text: str) -> bool:
    return _contains_any(text, THANKS_KEYWORDS)


def is_greeting(text: str) -> bool:
    """Whole-word match, so "this" or "high" never read as "hi"."""
    return any(word in GREETING_WORDS for word in normalize_text(text).split())
