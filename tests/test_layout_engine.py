import pytest

from core.config import ChartConfig
from core.errors import UnparseableTime
from core.layout_engine import ReservationLayoutEngine, layout
from core.time_axis import derive_window


def _layout(reservations, config):
    window = derive_window(reservations, config)
    return layout(reservations, window, config)


def test_back_to_back_reservation_is_conflict(make_reservation):
    config = ChartConfig(reservation_duration_hours=2)
    reservations = [
        make_reservation("2024-05-17 18:00", table="1", name="First"),
        make_reservation("2024-05-17 20:00", table="1", name="Second"),
    ]
    bars = _layout(reservations, config).bars

    assert [b.has_conflict for b in bars] == [False, True]


def test_one_minute_gap_is_not_conflict(make_reservation):
    config = ChartConfig(reservation_duration_hours=2)
    reservations = [
        make_reservation("2024-05-17 18:00", table="1"),
        make_reservation("2024-05-17 20:01", table="1"),
    ]
    bars = _layout(reservations, config).bars

    assert [b.has_conflict for b in bars] == [False, False]


def test_conflict_only_within_same_row(make_reservation):
    config = ChartConfig(reservation_duration_hours=2)
    reservations = [
        make_reservation("2024-05-17 18:00", table="1"),
        make_reservation("2024-05-17 20:00", table="2"),
    ]
    bars = _layout(reservations, config).bars

    assert not any(b.has_conflict for b in bars)


def test_bar_geometry(make_reservation):
    config = ChartConfig(reservation_duration_hours=2)
    reservations = [
        make_reservation("2024-05-17 18:00", table="1"),
        make_reservation("2024-05-17 20:00", table="3"),
    ]
    window = derive_window(reservations, config)
    bars = layout(reservations, window, config).bars
    unit = window.time_unit_width

    first, second = bars
    assert first.row_index == 0
    assert first.x == config.margin + unit
    assert first.w == 2 * unit
    assert first.y == config.margin + (config.row_height - config.bar_thickness) // 2
    assert first.h == config.bar_thickness

    assert second.row_index == 2
    assert second.y == config.margin + 2 * config.row_height + 2


def test_bar_clipped_at_right_margin(make_reservation):
    config = ChartConfig(reservation_duration_hours=6)
    reservations = [make_reservation("2024-05-17 20:00", table="1")]
    bar = _layout(reservations, config).bars[0]

    assert bar.x + bar.w == config.right_edge


def test_tiny_duration_still_visible(make_reservation):
    config = ChartConfig(reservation_duration_hours=0.001)
    bar = _layout([make_reservation("2024-05-17 18:10")], config).bars[0]

    assert bar.w == 1


@pytest.mark.parametrize("duration", [0.01, 1.75, 5, 12])
def test_bars_stay_inside_chart(make_reservation, duration):
    config = ChartConfig(reservation_duration_hours=duration)
    reservations = [
        make_reservation(f"2024-05-17 {hour:02d}:{minute:02d}", table=str(hour % 11 + 1))
        for hour in range(11, 24)
        for minute in (0, 15, 45, 59)
    ]
    bars = _layout(reservations, config).bars

    assert len(bars) == len(reservations)
    for bar in bars:
        assert bar.w >= 1
        assert bar.x + bar.w <= config.right_edge


def test_order_is_rows_then_input_order(config, make_reservation):
    reservations = [
        make_reservation("2024-05-17 19:00", table="2"),
        make_reservation("2024-05-17 18:00", table="1"),
        make_reservation("2024-05-17 17:00", table="1+2"),
    ]
    bars = _layout(reservations, config).bars

    assert [(b.row_index, b.reservation_index) for b in bars] == [(0, 1), (0, 2), (1, 0), (1, 2)]


def test_composite_table_gets_bar_in_each_row(config, make_reservation):
    bars = _layout([make_reservation("2024-05-17 18:00", table="3+4")], config).bars

    assert [b.row_index for b in bars] == [2, 3]
    assert bars[0].x == bars[1].x and bars[0].w == bars[1].w


def test_out_of_range_table_gives_warning_not_failure(config, make_reservation):
    result = _layout([make_reservation("2024-05-17 18:00", table="42")], config)

    assert result.bars == ()
    assert len(result.warnings) == 1
    assert result.warnings[0].token == "42"


def test_bar_label(config, make_reservation):
    bar = _layout(
        [make_reservation("2024-05-17 18:00", table="3+4", name="Alexandria Smith-Johnson", covers="4")],
        config,
    ).bars[0]

    assert bar.label == "Alexandria S... T:3+4 C:4"


def test_layout_is_idempotent(config, make_reservation):
    reservations = [
        make_reservation("2024-05-17 18:00", table="1+2"),
        make_reservation("2024-05-17 19:45", table="2"),
        make_reservation("2024-05-17 19:45", table="7+99"),
    ]
    window = derive_window(reservations, config)
    engine = ReservationLayoutEngine(config)

    assert engine.layout(reservations, window) == engine.layout(reservations, window)


def test_unparseable_time_aborts_layout(config, make_reservation):
    good = [make_reservation("2024-05-17 18:00")]
    window = derive_window(good, config)

    with pytest.raises(UnparseableTime) as exc:
        layout(good + [make_reservation(None)], window, config)
    assert exc.value.index == 1
