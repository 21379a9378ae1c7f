"""
Компоновщик диаграммы: собирает оси, засечки, строки столов, полосы и
детали бронирований в упорядоченный список команд рисования
"""

import logging
from dataclasses import dataclass, field
from typing import Tuple

from core.draw_commands import ALIGN_CENTER, ALIGN_LEFT, FillRect, FontSpec, Line, Text
from core.layout_engine import ReservationLayoutEngine
from core.time_axis import derive_window, produce_ticks
from utils.labels import footer_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartStyle:
    """Цвета (BGR) и шрифты диаграммы"""
    background: tuple = (255, 255, 255)
    axis_color: tuple = (0, 0, 0)
    axis_thickness: int = 2
    grid_color: tuple = (128, 128, 128)
    grid_thickness: int = 1
    text_color: tuple = (0, 0, 0)
    bar_color: tuple = (230, 216, 173)       # LightBlue
    conflict_color: tuple = (122, 160, 255)  # LightSalmon
    major_tick_length: int = 10
    minor_tick_length: int = 5
    tick_label_offset: int = 18
    row_label_offset: int = 15
    chart_font: FontSpec = field(default_factory=lambda: FontSpec("simplex", 0.4, 1))
    bar_font: FontSpec = field(default_factory=lambda: FontSpec("simplex", 0.4, 1))
    info_font: FontSpec = field(default_factory=lambda: FontSpec("simplex", 0.45, 1))


@dataclass(frozen=True)
class ComposedChart:
    commands: Tuple = ()
    warnings: Tuple = ()
    window: object = None
    bars: Tuple = ()


class ChartComposer:
    def __init__(self, config, style=None):
        self.config = config
        self.style = style or ChartStyle()
        self.engine = ReservationLayoutEngine(config)

    def compose(self, reservations) -> ComposedChart:
        """
        Команды рисования в порядке наложения:
        оси, засечки и подписи времени, строки столов, полосы с подписями,
        детали бронирований
        """
        window = derive_window(reservations, self.config)
        result = self.engine.layout(reservations, window)

        commands = []
        commands.extend(self._axis())
        commands.extend(self._ticks(window))
        commands.extend(self._rows())
        commands.extend(self._bars(result.bars))
        commands.extend(self._footer(reservations))

        logger.info("Composed %d draw commands", len(commands))
        return ComposedChart(
            commands=tuple(commands),
            warnings=result.warnings,
            window=window,
            bars=result.bars,
        )

    def _axis(self):
        cfg, st = self.config, self.style
        m = cfg.margin
        rows_bottom = m + cfg.total_tables * cfg.row_height
        return [
            Line((m, m), (cfg.right_edge, m), st.axis_color, st.axis_thickness),
            Line((m, m), (m, rows_bottom), st.axis_color, st.axis_thickness),
        ]

    def _ticks(self, window):
        cfg, st = self.config, self.style
        m = cfg.margin
        for tick in produce_ticks(window, cfg):
            length = st.major_tick_length if tick.is_major else st.minor_tick_length
            yield Line((tick.x, m), (tick.x, m - length), st.axis_color, st.axis_thickness)
            if tick.label is not None:
                yield Text((tick.x, m - st.tick_label_offset), tick.label,
                           st.chart_font, st.text_color, ALIGN_CENTER)

    def _rows(self):
        cfg, st = self.config, self.style
        for t in range(cfg.total_tables):
            row_top = cfg.margin + t * cfg.row_height
            row_bottom = row_top + cfg.row_height
            yield Line((cfg.margin, row_bottom), (cfg.right_edge, row_bottom),
                       st.grid_color, st.grid_thickness)
            yield Text((cfg.margin - st.row_label_offset, row_top + cfg.row_height // 2),
                       str(t + 1), st.chart_font, st.text_color, ALIGN_CENTER)

    def _bars(self, bars):
        st = self.style
        for bar in bars:
            color = st.conflict_color if bar.has_conflict else st.bar_color
            yield FillRect(bar.x, bar.y, bar.w, bar.h, color)
            # Подпись после заливки, чтобы её не перекрыло
            yield Text(bar.center, bar.label, st.bar_font, st.text_color, ALIGN_CENTER)

    def _footer(self, reservations):
        st = self.style
        for line in footer_lines(reservations, self.config):
            yield Text((line.x, line.y), line.text, st.info_font, st.text_color, ALIGN_LEFT)


def compose(reservations, config, style=None) -> ComposedChart:
    return ChartComposer(config, style).compose(reservations)
