"""
Временная ось: окно времени, перевод времени в пиксели, засечки
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import pandas as pd

from core.errors import DegenerateWindow, InsufficientData, UnparseableTime
from core.models import TimeWindow

logger = logging.getLogger(__name__)

TICKS_PER_HOUR = 4  # засечка каждые 15 минут


def parse_start_time(value, index, field="start_time") -> datetime:
    """
    Привести время бронирования к datetime (без часового пояса)

    Raises:
        UnparseableTime: пустое или нераспознанное значение
    """
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        raise UnparseableTime(index, field, value)

    if isinstance(value, datetime):
        if isinstance(value, pd.Timestamp):
            value = value.to_pydatetime()
        if value.tzinfo is not None:
            value = value.replace(tzinfo=None)
        return value

    if not isinstance(value, str) or not value.strip():
        raise UnparseableTime(index, field, value)

    try:
        ts = pd.to_datetime(value.strip())
    except (ValueError, OverflowError) as e:
        raise UnparseableTime(index, field, value) from e

    if pd.isna(ts):
        raise UnparseableTime(index, field, value)
    if ts.tzinfo is not None:
        # Нужны "настенные" часы ресторана, пояс отбрасываем
        ts = ts.tz_localize(None)
    return ts.to_pydatetime()


def parse_start_times(reservations):
    return [parse_start_time(r.start_time, i) for i, r in enumerate(reservations)]


def hours_since_anchor(instant: datetime, window: TimeWindow) -> int:
    days = (instant.date() - window.anchor_date).days
    return days * 24 + instant.hour


def derive_window(reservations, config) -> TimeWindow:
    """
    Вычислить окно времени по всем бронированиям

    first_hour = час самого раннего бронирования - 1
    last_hour = час самого позднего бронирования + lookahead_hours
    """
    if not reservations:
        raise InsufficientData("Cannot derive a time window from an empty reservation list")

    starts = parse_start_times(reservations)
    earliest = min(starts)
    latest = max(starts)

    anchor = earliest.date()
    first_hour = earliest.hour - 1
    last_hour = (latest.date() - anchor).days * 24 + latest.hour + config.lookahead_hours

    day_length = last_hour - first_hour
    if day_length <= 0:
        raise DegenerateWindow(first_hour, last_hour)

    time_unit_width = (config.width - 2 * config.margin) // day_length
    if time_unit_width < 1:
        raise DegenerateWindow(
            first_hour, last_hour,
            reason=f"{day_length} hours do not fit into {config.width - 2 * config.margin} px",
        )

    logger.debug(
        "Time window %02d..%02d (%d h, %d px/h)",
        first_hour, last_hour, day_length, time_unit_width,
    )
    return TimeWindow(
        anchor_date=anchor,
        first_hour=first_hour,
        last_hour=last_hour,
        time_unit_width=time_unit_width,
    )


def map_to_x(instant: datetime, window: TimeWindow, config) -> int:
    """Горизонтальная координата момента времени (пиксели)"""
    unit = window.time_unit_width
    hour = hours_since_anchor(instant, window)
    return config.margin + int((hour - window.first_hour) * unit + instant.minute / 60 * unit)


def format_tick_label(hour: int, minute: int) -> str:
    """24-часовой формат, 24:00 -> 00:00"""
    return f"{hour % 24:02d}:{minute:02d}"


@dataclass(frozen=True)
class Tick:
    x: int
    is_major: bool
    label: Optional[str] = None


class TickSequence:
    """
    Засечки оси времени от first_hour до last_hour включительно.

    Ленивая и перезапускаемая: каждый проход начинается заново.
    """

    def __init__(self, window: TimeWindow, config):
        self.window = window
        self.config = config

    def __len__(self):
        return self.window.day_length * TICKS_PER_HOUR + 1

    def __iter__(self):
        unit = self.window.time_unit_width
        for q in range(len(self)):
            x = self.config.margin + int(q * unit / TICKS_PER_HOUR)
            # Основные засечки - целый час и половина часа
            is_major = q % 2 == 0
            label = None
            if is_major:
                hour = self.window.first_hour + q // TICKS_PER_HOUR
                minute = (q % TICKS_PER_HOUR) * 15
                label = format_tick_label(hour, minute)
            yield Tick(x=x, is_major=is_major, label=label)


def produce_ticks(window: TimeWindow, config) -> TickSequence:
    return TickSequence(window, config)
