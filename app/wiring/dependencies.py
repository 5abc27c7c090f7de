from functools import lru_cache
from datetime import datetime
from zoneinfo import ZoneInfo

from app.core.config import settings
from app.application.ports.booking_store import BookingStorePort
from app.application.ports.service_catalog import ServiceCatalogPort
from app.application.use_cases.availability import AvailabilityUseCase
from app.application.use_cases.handle_agent_message import HandleAgentMessageUseCase
from app.application.use_cases.reply_composer import ReplyComposer
from app.application.use_cases.reservation import ReservationUseCase
from app.domain.entities.business_hours import BusinessHours
from app.infrastructure.intent.rule_based_strategy import RuleBasedIntentStrategy
from app.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore
from app.infrastructure.store.memory_store import MemoryBookingStore


_booking_store: MemoryBookingStore | None = None


def get_booking_store() -> BookingStorePort:
    global _booking_store
    if _booking_store is None:
        _booking_store = MemoryBookingStore()
    return _booking_store


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    return ServiceCatalogStore()


@lru_cache
def get_business_hours() -> BusinessHours:
    return BusinessHours(
        open_hour=settings.OPEN_HOUR,
        close_hour=settings.CLOSE_HOUR,
        slot_interval_minutes=settings.SLOT_INTERVAL_MINUTES,
        business_days=tuple(settings.BUSINESS_DAYS),
        timezone=ZoneInfo(settings.BUSINESS_TIMEZONE),
    )


def business_now() -> datetime:
    return datetime.now(get_business_hours().timezone)


def get_availability_use_case() -> AvailabilityUseCase:
    return AvailabilityUseCase(
        store=get_booking_store(),
        hours=get_business_hours(),
        days_ahead=settings.AVAILABILITY_DAYS_AHEAD,
    )


def get_reservation_use_case() -> ReservationUseCase:
    return ReservationUseCase(
        store=get_booking_store(),
        catalog=get_service_catalog(),
        hours=get_business_hours(),
        artist_name=settings.ARTIST_NAME,
    )


def get_handle_agent_message_use_case() -> HandleAgentMessageUseCase:
    return HandleAgentMessageUseCase(
        intent_strategy=RuleBasedIntentStrategy(
            catalog=get_service_catalog(),
            slot_interval_minutes=settings.SLOT_INTERVAL_MINUTES,
        ),
        reservation=get_reservation_use_case(),
        availability=get_availability_use_case(),
        catalog=get_service_catalog(),
        composer=ReplyComposer(business_name=settings.BUSINESS_NAME, artist_name=settings.ARTIST_NAME),
        clock=business_now,
        availability_count=settings.AVAILABILITY_REPLY_COUNT,
    )
