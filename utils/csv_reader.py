"""
Чтение выгрузки бронирований (CSV) в список Reservation
"""

import logging

import pandas as pd

from core.models import Reservation

logger = logging.getLogger(__name__)

# Колонка выгрузки -> поле Reservation
COLUMNS = {
    "Time": "start_time",
    "Name": "guest_name",
    "Party size": "covers",
    "Table name": "table_designation",
    "Phone number": "phone_number",
    "Any Allergies or Dietary requirements?": "allergy_note",
}

REQUIRED_COLUMNS = ("Time", "Name", "Table name")

# Служебные брони (оборудование), а не гости
IGNORED_NAMES = ("euro projector",)


def _cell(value):
    if pd.isna(value):
        return None
    value = str(value).strip()
    return value or None


def read_reservations(source, ignore_names=IGNORED_NAMES):
    """
    Args:
        source: путь к CSV или файловый объект (например, UploadFile.file)
        ignore_names: имена служебных броней, которые пропускаются (без учёта регистра)

    Returns:
        список Reservation в порядке строк файла
    """
    # Всё читаем как строки: номера столов "3+4" и телефоны не должны стать числами
    df = pd.read_csv(source, dtype=str, skip_blank_lines=True)
    df.columns = [str(c).strip() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"CSV is missing columns: {missing}")

    df = df.dropna(how="all")

    ignored = {n.strip().lower() for n in ignore_names}
    reservations = []
    for _, row in df.iterrows():
        values = {
            attr: _cell(row[column]) if column in df.columns else None
            for column, attr in COLUMNS.items()
        }
        values["guest_name"] = values["guest_name"] or ""
        if values["guest_name"].lower() in ignored:
            logger.debug("Skipping placeholder booking %r", values["guest_name"])
            continue
        reservations.append(Reservation(**values))

    logger.info("Read %d reservations", len(reservations))
    return reservations
