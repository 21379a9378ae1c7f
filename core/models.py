"""
Модели данных: бронирование, временное окно, полоса диаграммы
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Tuple, Union

from core.errors import RowResolutionWarning


@dataclass(frozen=True)
class Reservation:
    """Одно бронирование из выгрузки (только для чтения)"""
    start_time: Union[datetime, str, None]
    table_designation: Optional[str]
    guest_name: str = ""
    covers: Union[int, str, None] = None
    phone_number: Optional[str] = None
    allergy_note: Optional[str] = None


@dataclass(frozen=True)
class TimeWindow:
    """
    Видимый диапазон времени.

    Часы отсчитываются от полуночи anchor_date, поэтому 01:00 следующего
    дня - это час 25.
    """
    anchor_date: date
    first_hour: int
    last_hour: int
    time_unit_width: int

    @property
    def day_length(self) -> int:
        return self.last_hour - self.first_hour


@dataclass(frozen=True)
class LayoutBar:
    row_index: int
    x: int
    y: int
    w: int
    h: int
    has_conflict: bool
    label: str
    reservation_index: int

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.w // 2, self.y + self.h // 2)


@dataclass(frozen=True)
class LayoutResult:
    bars: Tuple[LayoutBar, ...] = ()
    warnings: Tuple[RowResolutionWarning, ...] = field(default_factory=tuple)
