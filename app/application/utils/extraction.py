from __future__ import annotations

import re

from app.domain.entities.message import ChatMessage
from app.domain.entities.service import Service

EMAIL_PATTERN = re.compile(r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}", re.IGNORECASE)
PHONE_PATTERN = re.compile(r"\+?\d[\d\s().-]{7,}\d")

# Checked in order against each user message, newest message first.
NAME_PATTERNS = (
    re.compile(r"my name is ([a-z\s'-]+)", re.IGNORECASE),
    re.compile(r"this is ([a-z\s'-]+)", re.IGNORECASE),
    re.compile(r"i am ([a-z\s'-]+)", re.IGNORECASE),
    re.compile(r"i'm ([a-z\s'-]+)", re.IGNORECASE),
)


def user_messages(messages: list[ChatMessage]) -> list[ChatMessage]:
    return [message for message in messages if message.role == "user"]


def conversation_text(messages: list[ChatMessage]) -> str:
    """Lowercased user side of the conversation, joined by spaces."""
    return " ".join(message.content.lower() for message in user_messages(messages))


def extract_email(conversation: str) -> str | None:
    match = EMAIL_PATTERN.search(conversation)
    return match.group(0) if match else None


def extract_phone(conversation: str) -> str | None:
    match = PHONE_PATTERN.search(conversation)
    if not match:
        return None
    return re.sub(r"\s+", " ", match.group(0)).strip()


def extract_name(messages: list[ChatMessage]) -> str | None:
    for message in reversed(user_messages(messages)):
        for pattern in NAME_PATTERNS:
            match = pattern.search(message.content)
            if match:
                name = " ".join(part[:1].upper() + part[1:] for part in match.group(1).split(" ")).strip()
                if name:
                    return name
    return None


def determine_service(conversation: str, services: list[Service]) -> Service | None:
    """
    Highest keyword-hit service. Ties go to the earlier catalog entry, and a
    conversation with no hits resolves nothing.
    """
    best: Service | None = None
    best_score = 0
    for service in services:
        score = sum(1 for keyword in service.keywords if keyword.lower() in conversation)
        if score > best_score:
            best, best_score = service, score
    return best
