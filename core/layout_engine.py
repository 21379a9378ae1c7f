"""
Раскладка бронирований: геометрия полос, обрезка по краю, конфликты
"""

import logging
from collections import defaultdict
from datetime import timedelta

from core.models import LayoutBar, LayoutResult
from core.table_rows import resolve_rows
from core.time_axis import map_to_x, parse_start_times
from utils.labels import bar_label

logger = logging.getLogger(__name__)


class ReservationLayoutEngine:
    def __init__(self, config):
        """
        Args:
            config: ChartConfig с размерами диаграммы
        """
        self.config = config
        self.duration = timedelta(hours=config.reservation_duration_hours)

    def layout(self, reservations, window) -> LayoutResult:
        """
        Полосы для всех бронирований

        Порядок: строки по возрастанию, внутри строки - порядок входного списка.
        От порядка зависит, что перекрывает что при отрисовке.
        """
        starts = parse_start_times(reservations)
        ends = [s + self.duration for s in starts]

        # Строка -> индексы бронирований в порядке входного списка
        rows = defaultdict(list)
        warnings = []
        for i, r in enumerate(reservations):
            resolved, row_warnings = resolve_rows(
                r.table_designation,
                self.config.total_tables,
                separator=self.config.table_separator,
                reservation_index=i,
            )
            warnings.extend(row_warnings)
            for row in resolved:
                rows[row].append(i)

        bars = []
        for row in sorted(rows):
            members = rows[row]
            for i in members:
                conflict = self._has_conflict(i, members, starts, ends)
                bars.append(self._make_bar(i, row, reservations[i], starts[i], ends[i], window, conflict))

        logger.info(
            "Layout: %d reservations -> %d bars in %d rows (%d warnings)",
            len(reservations), len(bars), len(rows), len(warnings),
        )
        return LayoutResult(bars=tuple(bars), warnings=tuple(warnings))

    @staticmethod
    def _has_conflict(index, members, starts, ends):
        # Конец другого бронирования точно совпадает с началом этого
        return any(
            other != index and ends[other] == starts[index]
            for other in members
        )

    def _make_bar(self, index, row, reservation, start, end, window, conflict):
        cfg = self.config

        start_x = map_to_x(start, window, cfg)
        end_x = map_to_x(end, window, cfg)
        width = max(end_x - start_x, 1)

        # Не рисуем правее правого поля
        if end_x > cfg.right_edge:
            width = max(cfg.right_edge - start_x, 1)

        row_top = cfg.margin + row * cfg.row_height
        y = row_top + (cfg.row_height - cfg.bar_thickness) // 2

        return LayoutBar(
            row_index=row,
            x=start_x,
            y=y,
            w=width,
            h=cfg.bar_thickness,
            has_conflict=conflict,
            label=bar_label(reservation, cfg.bar_label_length),
            reservation_index=index,
        )


def layout(reservations, window, config) -> LayoutResult:
    return ReservationLayoutEngine(config).layout(reservations, window)
