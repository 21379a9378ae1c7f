"""
Команды рисования - выход компоновщика, вход для движка отрисовки
"""

from dataclasses import dataclass
from typing import Tuple

Point = Tuple[int, int]
Color = Tuple[int, int, int]  # BGR, как в OpenCV

ALIGN_LEFT = "left"      # position - левый верхний угол текста
ALIGN_CENTER = "center"  # position - центр текста


@dataclass(frozen=True)
class FontSpec:
    face: str = "simplex"
    scale: float = 0.4
    thickness: int = 1


@dataclass(frozen=True)
class Line:
    p1: Point
    p2: Point
    color: Color
    thickness: int = 1


@dataclass(frozen=True)
class FillRect:
    x: int
    y: int
    w: int
    h: int
    color: Color


@dataclass(frozen=True)
class Text:
    position: Point
    text: str
    font: FontSpec
    color: Color
    alignment: str = ALIGN_LEFT
