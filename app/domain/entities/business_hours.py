from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo


@dataclass(frozen=True)
class BusinessHours:
    open_hour: int = 9
    close_hour: int = 18
    slot_interval_minutes: int = 30
    business_days: tuple[int, ...] = (1, 2, 3, 4, 5, 6)  # ISO weekdays, Monday=1
    timezone: ZoneInfo = ZoneInfo("UTC")

    def is_business_day(self, moment: date) -> bool:
        return moment.isoweekday() in self.business_days

    def open_boundary(self, moment: datetime) -> datetime:
        local = moment.astimezone(self.timezone)
        return local.replace(hour=self.open_hour, minute=0, second=0, microsecond=0)

    def close_boundary(self, moment: datetime) -> datetime:
        local = moment.astimezone(self.timezone)
        return local.replace(hour=self.close_hour, minute=0, second=0, microsecond=0)

    @property
    def slot_interval(self) -> timedelta:
        return timedelta(minutes=self.slot_interval_minutes)
