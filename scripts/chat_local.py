#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP).

Usage:
  python3 scripts/chat_local.py

What it does:
- Keeps the whole transcript for the session, the way the chat widget does
- Sends it through the same HandleAgentMessageUseCase the /agent endpoint uses
- Prints the classified intent, any booking made, and the reply text
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.exceptions import AgentRequestError
from app.domain.entities.message import ChatMessage
from app.wiring.dependencies import get_booking_store, get_handle_agent_message_use_case


def _print_header() -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print("Type your message and press Enter.")
    print("Commands: /new (new conversation), /bookings, /quit, /help")
    print("-" * 60)


def main() -> None:
    use_case = get_handle_agent_message_use_case()
    store = get_booking_store()
    transcript: list[ChatMessage] = []
    _print_header()

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd = user_text.lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  /new      -> start a new conversation (bookings are kept)")
            print("  /bookings -> list bookings made in this process")
            print("  /quit     -> exit")
            continue
        if cmd == "/new":
            transcript = []
            print("New conversation")
            continue
        if cmd == "/bookings":
            bookings = store.list_bookings()
            print("\n--- Bookings ---")
            for booking in bookings:
                print(f"{booking.starts_at:%a %b %d %H:%M} {booking.service_id} {booking.client_name} <{booking.email}>")
            if not bookings:
                print("(none)")
            continue

        transcript.append(ChatMessage(role="user", content=user_text))
        try:
            reply = use_case.handle(transcript)
        except AgentRequestError as e:
            reply = use_case.reject(e)
        transcript.append(ChatMessage(role="assistant", content=reply.text))

        print("\n--- Decision ---")
        for key, value in reply.meta.items():
            print(f"{key}: {value}")
        if reply.booking:
            print(f"booking: {reply.booking.id} {reply.booking.starts_at.isoformat()}")

        print("\n--- Reply ---")
        print(reply.text.strip())
        print("-" * 60)


if __name__ == "__main__":
    main()
