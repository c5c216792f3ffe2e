import datetime as dt

import pytest

from dbfkit.header import UpdateDate, low_def_time


def test_to_bytes_pins_wire_format():
    assert UpdateDate.from_date(dt.date(2018, 12, 1)).to_bytes() == bytes([118, 12, 1])


@pytest.mark.parametrize(
    "when",
    [dt.date(1900, 1, 1), dt.date(2018, 1, 3), dt.date(2024, 2, 29), dt.date(2155, 12, 31)],
)
def test_date_round_trip(when):
    assert UpdateDate.from_date(when).to_date() == when


@pytest.mark.parametrize(
    "when", [dt.date(1900, 1, 1), dt.date(2020, 7, 15), dt.date(2155, 12, 31)]
)
def test_bytes_round_trip(when):
    encoded = UpdateDate.from_date(when)
    assert UpdateDate.from_bytes(encoded.to_bytes()) == encoded


def test_from_date_drops_time_of_day():
    moment = dt.datetime(2021, 3, 4, 23, 59, 58)
    assert UpdateDate.from_date(moment).to_date() == dt.date(2021, 3, 4)


def test_year_property_adds_offset():
    assert UpdateDate.from_date(dt.date(2001, 5, 6)).year == 2001


def test_from_bytes_uses_first_three_bytes():
    date = UpdateDate.from_bytes(bytes([100, 2, 3, 99, 98]))
    assert date.to_bytes() == bytes([100, 2, 3])


def test_month_zero_rolls_back_a_year():
    assert UpdateDate.from_bytes(bytes([118, 0, 1])).to_date() == dt.date(2017, 12, 1)


def test_day_zero_is_last_day_of_previous_month():
    assert UpdateDate.from_bytes(bytes([118, 3, 0])).to_date() == dt.date(2018, 2, 28)


def test_today_matches_current_date():
    assert UpdateDate.today().to_date() == low_def_time(dt.datetime.now())


def test_from_bytes_too_short_raises():
    with pytest.raises(ValueError):
        UpdateDate.from_bytes(b"\x01\x02")


@pytest.mark.parametrize("when", [dt.date(1899, 12, 31), dt.date(2156, 1, 1)])
def test_from_date_out_of_range_raises(when):
    with pytest.raises(ValueError):
        UpdateDate.from_date(when)


def test_constructor_rejects_values_outside_a_byte():
    with pytest.raises(ValueError):
        UpdateDate(256, 1, 1)


def test_low_def_time_of_datetime():
    assert low_def_time(dt.datetime(2020, 5, 6, 13, 45, 12)) == dt.date(2020, 5, 6)


def test_low_def_time_of_date_is_same_day():
    assert low_def_time(dt.date(2019, 11, 30)) == dt.date(2019, 11, 30)


def test_low_def_time_agrees_with_stored_date():
    moment = dt.datetime(2030, 8, 9, 7, 6, 5)
    assert UpdateDate.from_date(moment).to_date() == low_def_time(moment)