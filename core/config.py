"""
Параметры геометрии диаграммы и их загрузка из JSON
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path


@dataclass(frozen=True)
class ChartConfig:
    width: int = 1920
    height: int = 1080
    margin: int = 30
    row_height: int = 30
    bar_thickness: int = 26
    total_tables: int = 11
    # В выгрузке нет времени окончания - длительность фиксирована
    reservation_duration_hours: float = 1.75
    lookahead_hours: int = 3
    table_separator: str = "+"
    bar_label_length: int = 15
    footer_label_length: int = 30
    footer_line_height: int = 20

    def __post_init__(self):
        if self.total_tables < 1:
            raise ValueError(f"total_tables must be >= 1, got {self.total_tables}")
        if self.width <= 2 * self.margin:
            raise ValueError(f"width ({self.width}) must exceed 2 * margin ({self.margin})")
        if self.reservation_duration_hours <= 0:
            raise ValueError(
                f"reservation_duration_hours must be > 0, got {self.reservation_duration_hours}"
            )
        if self.lookahead_hours < 1:
            raise ValueError(f"lookahead_hours must be >= 1, got {self.lookahead_hours}")
        if not 0 < self.bar_thickness <= self.row_height:
            raise ValueError(
                f"bar_thickness must be in 1..row_height ({self.row_height}), got {self.bar_thickness}"
            )
        if self.bar_label_length < 4 or self.footer_label_length < 4:
            raise ValueError("label lengths must be >= 4 to fit the ellipsis")
        if not self.table_separator:
            raise ValueError("table_separator must not be empty")

    @property
    def right_edge(self) -> int:
        """Правая граница области построения"""
        return self.width - self.margin


def load_chart_config(config_path=None) -> ChartConfig:
    """
    Загрузить конфигурацию диаграммы

    Args:
        config_path: путь к chart_config.json (None - значения по умолчанию)
    """
    if config_path is None:
        return ChartConfig()

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    known = {f.name for f in fields(ChartConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown chart config keys: {sorted(unknown)}")

    return ChartConfig(**data)
