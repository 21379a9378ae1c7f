"""Общие фикстуры для тестов диаграммы."""

import pytest

from core.config import ChartConfig
from core.models import Reservation


@pytest.fixture
def config():
    return ChartConfig()


@pytest.fixture
def make_reservation():
    def _make(time, table="1", name="Guest", covers="2", phone="0400 000 000", allergies=None):
        return Reservation(
            start_time=time,
            table_designation=table,
            guest_name=name,
            covers=covers,
            phone_number=phone,
            allergy_note=allergies,
        )
    return _make


SAMPLE_CSV = (
    "Time,Team note,Name,Party size,Table name,Status,Phone number,Any Allergies or Dietary requirements?\n"
    "2024-05-17 18:00,,Alexandria Smith-Johnson,4,3+4,Confirmed,0412345678,Nuts\n"
    "2024-05-17 19:30,,Ann,2,1,Confirmed,0400111222,\n"
    "2024-05-17 20:00,window,Bob,6,99,Confirmed,0400333444,\n"
)


@pytest.fixture
def sample_csv_text():
    return SAMPLE_CSV
