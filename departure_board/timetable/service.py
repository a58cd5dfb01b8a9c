import logging
import threading
from datetime import time
from typing import List, Optional

from departure_board.models import Stop, Timetable
from departure_board.timeutils import END_OF_DAY, format_hour_minute, parse_hour_minute

logger = logging.getLogger(__name__)

# (route, station, departure) rows loaded by /addSample
SAMPLE_STOPS = [
    ("London-Norwich", "Stevenage", "10:00"),
    ("London-Norwich", "Baldock", "11:00"),
    ("London-Norwich", "Ipswitch", "12:00"),
    ("London-Norwich", "XPTO", "13:00"),
    ("Norwich-London", "Baldock", "9:00"),
    ("Norwich-London", "Oxford", "10:00"),
    ("Norwich-London", "Ipswitch", "11:00"),
    ("Norwich-London", "XPTO", "11:00"),
]


class TimetableStore:
    """Owns the board's timetable and serializes access to it.

    Route handlers run in a threadpool, so every read and write goes through
    the same lock. Slices are taken under the lock and returned as
    independent copies.
    """

    def __init__(self, timetable: Optional[Timetable] = None):
        if timetable is None:
            timetable = Timetable.create(time(0, 0), END_OF_DAY)
        self._timetable = timetable
        self._lock = threading.RLock()

    def add_stop(self, route: str, station: str, departure: time) -> Stop:
        with self._lock:
            stop = self._timetable.add_stop(route, station, departure)
        logger.info("Added stop %s - %s at %s", format_hour_minute(departure), route, station)
        return stop

    def add_station(self, station: str) -> str:
        with self._lock:
            had_stops = bool(self._timetable.stops_per_station.get(station))
            name = self._timetable.add_station(station)
        if had_stops:
            logger.warning("Station %s reset, existing stops discarded", station)
        else:
            logger.info("Added station %s", station)
        return name

    def get_stops(self, station: str) -> List[Stop]:
        with self._lock:
            return self._timetable.get_stops(station)

    def station_names(self) -> List[str]:
        with self._lock:
            return list(self._timetable.stops_per_station)

    def get_sliced_timetable(self, from_: time, to: time) -> Timetable:
        with self._lock:
            return self._timetable.get_sliced_timetable(from_, to)

    def get_json_timetable(self, from_: time, to: time) -> str:
        return self.get_sliced_timetable(from_, to).to_json()

    def get_text_timetable(self, from_: time, to: time) -> str:
        return self.get_sliced_timetable(from_, to).to_text()

    def load_sample(self) -> List[Stop]:
        """Add the sample London/Norwich departures"""
        with self._lock:
            stops = [
                self._timetable.add_stop(route, station, parse_hour_minute(departure))
                for route, station, departure in SAMPLE_STOPS
            ]
        logger.info("Loaded %d sample stops", len(stops))
        return stops
