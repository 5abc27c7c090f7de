from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    description: str
    duration_minutes: int
    price: int
    keywords: tuple[str, ...] = ()
