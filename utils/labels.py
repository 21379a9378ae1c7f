"""
Подписи полос и список деталей бронирований под диаграммой
"""

from dataclasses import dataclass

ELLIPSIS = "..."


def abbreviate(name, max_length=15):
    """Сократить имя до max_length символов (с многоточием)"""
    name = "" if name is None else str(name)
    if len(name) > max_length:
        return name[:max_length - len(ELLIPSIS)] + ELLIPSIS
    return name


def _display(value):
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def bar_label(reservation, max_length=15):
    """Подпись внутри полосы: имя, стол, количество гостей"""
    name = abbreviate(reservation.guest_name, max_length)
    return f"{name} T:{_display(reservation.table_designation)} C:{_display(reservation.covers)}"


def footer_text(reservation, max_length=30):
    allergies = _display(reservation.allergy_note) or "No"
    return (
        f"Name: {abbreviate(reservation.guest_name, max_length)}"
        f" | Phone: {_display(reservation.phone_number)}"
        f" | Allergies: {allergies}"
    )


@dataclass(frozen=True)
class FooterLine:
    x: int
    y: int
    text: str


def footer_lines(reservations, config):
    """
    Строки деталей под последним столом, по одной на бронирование.

    Порядок - как во входном списке (это справочник, не часть шкалы времени).
    """
    top = config.margin + config.total_tables * config.row_height + config.margin
    return [
        FooterLine(
            x=config.margin,
            y=top + i * config.footer_line_height,
            text=footer_text(r, config.footer_label_length),
        )
        for i, r in enumerate(reservations)
    ]
