from __future__ import annotations

from app.domain.entities.service import Service


SERVICE_CATALOG: tuple[Service, ...] = (
    Service(
        id="bridal-glam",
        name="Signature Bridal Glam",
        description=(
            "A luxe, camera-ready bridal application with complexion prep, "
            "airbrushed finish, and touch-up kit."
        ),
        duration_minutes=120,
        price=320,
        keywords=("bridal", "wedding", "bride"),
    ),
    Service(
        id="event-glam",
        name="Event Glam",
        description="Full-face glam perfect for red carpet, photoshoots, and elevated nights out.",
        duration_minutes=90,
        price=220,
        keywords=("event", "glam", "party", "photoshoot"),
    ),
    Service(
        id="soft-glow",
        name="Soft Glow Makeup",
        description="Effortless complexion focus with luminous skin, soft eyes, and natural lashes.",
        duration_minutes=75,
        price=180,
        keywords=("soft", "natural", "glow", "daytime"),
    ),
    Service(
        id="lesson",
        name="Personal Makeup Lesson",
        description=(
            "A 90-minute one-on-one lesson covering techniques, product curation, "
            "and a personalized face chart."
        ),
        duration_minutes=90,
        price=260,
        keywords=("lesson", "class", "tutorial", "session"),
    ),
)
