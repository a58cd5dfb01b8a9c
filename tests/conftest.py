import pytest
from fastapi.testclient import TestClient

from departure_board.config import Settings
from departure_board.main import create_app
from departure_board.models import Timetable
from departure_board.timeutils import parse_hour_minute
from departure_board.timetable.service import TimetableStore


def hm(value: str):
    return parse_hour_minute(value)


@pytest.fixture
def timetable() -> Timetable:
    """Four stops over three stations, two routes at Baldock 11:00"""
    table = Timetable.create(hm("00:00"), hm("23:59"))
    table.add_stop("London-Norwich", "Stevenage", hm("10:00"))
    table.add_stop("London-Norwich", "Baldock", hm("11:00"))
    table.add_stop("London-Cambridge", "Baldock", hm("11:00"))
    table.add_stop("London-Norwich", "Ipswitch", hm("12:00"))
    return table


@pytest.fixture
def store() -> TimetableStore:
    return TimetableStore()


@pytest.fixture
def client(store) -> TestClient:
    app = create_app(Settings(WINDOW_MINUTES=60, LOAD_SAMPLE_ON_STARTUP=False), store=store)
    return TestClient(app)
