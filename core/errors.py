"""
Ошибки построения диаграммы бронирований
"""

from dataclasses import dataclass


class ChartError(Exception):
    """Базовая ошибка: диаграмму построить нельзя"""


class UnparseableTime(ChartError):
    def __init__(self, index, field, value):
        """
        Args:
            index: номер бронирования во входном списке
            field: имя поля с временем
            value: исходное значение
        """
        self.index = index
        self.field = field
        self.value = value
        super().__init__(
            f"Reservation #{index}: cannot parse {field}={value!r} as a date/time"
        )


class DegenerateWindow(ChartError):
    def __init__(self, first_hour, last_hour, reason="time window is empty"):
        self.first_hour = first_hour
        self.last_hour = last_hour
        super().__init__(f"Degenerate time window {first_hour}..{last_hour}: {reason}")


class InsufficientData(ChartError):
    def __init__(self, message="No reservations to chart"):
        super().__init__(message)


@dataclass(frozen=True)
class RowResolutionWarning:
    """Некритичное предупреждение: токен стола пропущен"""
    reservation_index: int
    token: str
    reason: str

    def __str__(self):
        return f"Reservation #{self.reservation_index}: table {self.token!r} skipped ({self.reason})"
