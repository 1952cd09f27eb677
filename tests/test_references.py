import pytest

from enigmaar.references import (
    Calendar,
    ChartCat,
    CoordinateSystem,
    ObserverPosition,
    ProjectionType,
    Rating,
    WheelType,
    all_calendars,
    all_chart_cats,
    all_coordinate_systems,
    all_observer_positions,
    all_projection_types,
    all_ratings,
    all_wheel_types,
)

PREFIXES = [
    (CoordinateSystem, "r_cs_"),
    (ObserverPosition, "r_op_"),
    (ProjectionType, "r_pt_"),
    (Rating, "r_rr_"),
    (ChartCat, "r_cc_"),
    (Calendar, "r_cal_"),
    (WheelType, "r_wh_"),
]


def _all_lists():
    return {
        CoordinateSystem: all_coordinate_systems(),
        ObserverPosition: all_observer_positions(),
        ProjectionType: all_projection_types(),
        Rating: all_ratings(),
        ChartCat: all_chart_cats(),
        Calendar: all_calendars(),
        WheelType: all_wheel_types(),
    }


@pytest.mark.parametrize("enum_cls, prefix", PREFIXES)
def test_keys_cover_enum_in_order(enum_cls, prefix):
    lists = {
        CoordinateSystem: all_coordinate_systems(),
        ObserverPosition: all_observer_positions(),
        ProjectionType: all_projection_types(),
        Rating: all_ratings(),
        ChartCat: all_chart_cats(),
        Calendar: all_calendars(),
        WheelType: all_wheel_types(),
    }
    assert [item.key for item in lists[enum_cls]] == list(enum_cls)


@pytest.mark.parametrize("enum_cls, prefix", PREFIXES)
def test_text_ids_have_prefix_and_are_unique(enum_cls, prefix):
    lists = {
        CoordinateSystem: all_coordinate_systems(),
        ObserverPosition: all_observer_positions(),
        ProjectionType: all_projection_types(),
        Rating: all_ratings(),
        ChartCat: all_chart_cats(),
        Calendar: all_calendars(),
        WheelType: all_wheel_types(),
    }
    ids = [item.text_id for item in lists[enum_cls]]
    assert all(text_id.startswith(prefix) for text_id in ids)
    assert len(set(ids)) == len(ids)


def test_every_list_has_one_entry_per_member():
    for enum_cls, items in _all_lists().items():
        assert len(items) == len(enum_cls)


def test_calendar_texts():
    texts = {item.key: item.text_id for item in all_calendars()}
    assert texts[Calendar.GREGORIAN] == "r_cal_gregorian"
    assert texts[Calendar.JULIAN_BCE] == "r_cal_julian_bce"


def test_projection_texts():
    texts = [item.text_id for item in all_projection_types()]
    assert texts == ["r_pt_2d", "r_pt_oblique"]


def test_rating_texts():
    texts = {item.key: item.text_id for item in all_ratings()}
    assert texts[Rating.XX] == "r_rr_xx"
    assert texts[Rating.DD] == "r_rr_dd"


def test_returned_lists_are_independent():
    first = all_chart_cats()
    first.clear()
    assert len(all_chart_cats()) == len(ChartCat)