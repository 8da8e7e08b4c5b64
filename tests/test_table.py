import pytest

from clubledger.clocktime import parse_time
from clubledger.table import Table


@pytest.fixture
def table():
    return Table(1)


def test_constructor(table):
    assert table.table_id == 1
    assert table.occupied is False
    assert table.revenue == 0
    assert str(table.total_occupied_time) == "00:00"


def test_occupy_and_free(table):
    table.occupy("client1", parse_time("10:00"))
    assert table.occupied is True
    assert table.current_client == "client1"
    table.free(parse_time("12:30"), 100)
    assert table.occupied is False
    assert table.current_client == ""
    assert table.revenue == 300
    assert str(table.total_occupied_time) == "02:30"


def test_multiple_sessions(table):
    table.occupy("client1", parse_time("10:00"))
    table.free(parse_time("11:00"), 100)
    assert table.revenue == 100
    assert str(table.total_occupied_time) == "01:00"

    table.occupy("client2", parse_time("12:00"))
    table.free(parse_time("13:45"), 100)
    assert table.revenue == 300
    assert str(table.total_occupied_time) == "02:45"


def test_zero_length_session_costs_nothing(table):
    table.occupy("client1", parse_time("10:00"))
    table.free(parse_time("10:00"), 100)
    assert table.revenue == 0
    assert str(table.total_occupied_time) == "00:00"


def test_one_minute_is_billed_as_full_hour(table):
    table.occupy("client1", parse_time("10:00"))
    table.free(parse_time("10:01"), 70)
    assert table.revenue == 70