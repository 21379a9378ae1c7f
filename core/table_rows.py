"""
Назначение бронирования строкам диаграммы (столам)
"""

import logging

from core.errors import RowResolutionWarning

logger = logging.getLogger(__name__)


def resolve_rows(table_designation, total_tables, separator="+", reservation_index=0):
    """
    Разобрать обозначение стола ("3+4") в номера строк

    Args:
        table_designation: один или несколько номеров столов через separator
        total_tables: количество строк в диаграмме
        separator: разделитель объединённых столов
        reservation_index: номер бронирования (для предупреждений)

    Returns:
        (frozenset индексов строк с 0, список RowResolutionWarning)
    """
    warnings = []

    if table_designation is None or not str(table_designation).strip():
        warnings.append(RowResolutionWarning(reservation_index, "", "no table assigned"))
        return frozenset(), warnings

    rows = set()
    for raw in str(table_designation).split(separator):
        token = raw.strip()
        try:
            number = int(token)
        except ValueError:
            warnings.append(RowResolutionWarning(reservation_index, token, "not a table number"))
            continue

        row = number - 1
        if 0 <= row < total_tables:
            rows.add(row)
        else:
            warnings.append(
                RowResolutionWarning(reservation_index, token, f"outside tables 1..{total_tables}")
            )

    for w in warnings:
        logger.warning("%s", w)

    return frozenset(rows), warnings
