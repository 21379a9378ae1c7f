"""
Отрисовка команд диаграммы с помощью OpenCV
"""

import base64
import logging
from pathlib import Path

import cv2
import numpy as np

from core.draw_commands import ALIGN_CENTER, FillRect, Line, Text

logger = logging.getLogger(__name__)

FONT_FACES = {
    "simplex": cv2.FONT_HERSHEY_SIMPLEX,
    "duplex": cv2.FONT_HERSHEY_DUPLEX,
    "plain": cv2.FONT_HERSHEY_PLAIN,
    "complex": cv2.FONT_HERSHEY_COMPLEX,
}


def _font_face(font):
    try:
        return FONT_FACES[font.face]
    except KeyError:
        raise ValueError(f"Unknown font face: {font.face}")


def draw_text(image, command):
    """Текст с выравниванием: left - от левого верхнего угла, center - по центру"""
    face = _font_face(command.font)
    (tw, th), _ = cv2.getTextSize(command.text, face, command.font.scale, command.font.thickness)
    x, y = command.position

    if command.alignment == ALIGN_CENTER:
        org = (int(x - tw / 2), int(y + th / 2))
    else:
        org = (int(x), int(y + th))

    cv2.putText(image, command.text, org, face, command.font.scale,
                command.color, command.font.thickness, cv2.LINE_AA)


def render_commands(commands, width, height, background=(255, 255, 255)):
    """
    Рисуем команды по порядку на белом холсте

    Args:
        commands: последовательность Line / FillRect / Text
        width, height: размер изображения
        background: цвет фона (BGR)

    Returns:
        numpy array (height, width, 3) BGR
    """
    image = np.full((height, width, 3), background, dtype=np.uint8)

    for command in commands:
        if isinstance(command, Line):
            cv2.line(image, command.p1, command.p2, command.color, command.thickness)
        elif isinstance(command, FillRect):
            # Углы у cv2.rectangle включительные
            cv2.rectangle(
                image,
                (command.x, command.y),
                (command.x + command.w - 1, command.y + command.h - 1),
                command.color,
                -1,
            )
        elif isinstance(command, Text):
            draw_text(image, command)
        else:
            raise TypeError(f"Unsupported draw command: {type(command).__name__}")

    return image


def render_chart(composed, config, style):
    return render_commands(composed.commands, config.width, config.height, style.background)


def encode_png(image) -> bytes:
    ok, buffer = cv2.imencode(".png", image)
    if not ok:
        raise RuntimeError("PNG encoding failed")
    return buffer.tobytes()


def to_data_uri(png_bytes: bytes) -> str:
    """PNG -> data URI для вставки в <img src=...>"""
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")


def chart_filename(chart_date) -> str:
    return f"Table Reservations Gantt Chart - {chart_date:%d-%m-%Y}.png"


def save_chart(image, output_dir, chart_date):
    """Сохранить диаграмму в output_dir, имя по дате бронирований"""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    output_path = output_dir / chart_filename(chart_date)
    if not cv2.imwrite(str(output_path), image):
        raise RuntimeError(f"Cannot write image: {output_path}")

    logger.info("Chart saved: %s", output_path)
    return output_path
