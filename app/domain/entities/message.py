from dataclasses import dataclass


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "user", "assistant", "system"
    content: str
