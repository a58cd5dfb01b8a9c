from datetime import time as dtime
from io import StringIO
from typing import Dict, Iterable, List

from pydantic import BaseModel, Field, field_serializer

from departure_board.timeutils import format_hour_minute, seconds_of_day

# Pad applied on both sides of a window so boundary minutes match
WINDOW_PAD_SECONDS = 60

SEPARATOR = "-" * 21
NO_DEPARTURES = "-- No departures"


class Stop(BaseModel):
    """A single scheduled departure of a route from a station"""
    station_name: str = Field(..., alias="stationName")
    time: dtime
    route_name: str = Field(..., alias="routeName")

    @field_serializer("time")
    def serialize_time(self, value: dtime) -> str:
        return format_hour_minute(value)

    class Config:
        frozen = True
        populate_by_name = True


def get_stops_between(stops: Iterable[Stop], from_: dtime, to: dtime) -> List[Stop]:
    """Stops departing within [from_, to] at minute granularity, in input order"""
    lower = seconds_of_day(from_) - WINDOW_PAD_SECONDS
    upper = seconds_of_day(to) + WINDOW_PAD_SECONDS

    result = []
    for stop in stops:
        departs = seconds_of_day(stop.time)
        if lower < departs < upper:
            result.append(stop)
    return result


class Timetable(BaseModel):
    """Stops grouped by station.

    ``from_``/``to`` describe the window the timetable covers. They are
    informational only: ``add_stop`` accepts times outside of them.
    """
    from_: dtime = Field(..., alias="from")
    to: dtime
    stops_per_station: Dict[str, List[Stop]] = Field(default_factory=dict, alias="stopsPerStation")

    @field_serializer("from_", "to")
    def serialize_window(self, value: dtime) -> str:
        return format_hour_minute(value)

    class Config:
        populate_by_name = True

    @classmethod
    def create(cls, from_: dtime, to: dtime) -> "Timetable":
        return cls(from_=from_, to=to)

    def add_stop(self, route: str, station: str, time: dtime) -> Stop:
        if station not in self.stops_per_station:
            self.add_station(station)

        stop = Stop(route_name=route, station_name=station, time=time)
        self.stops_per_station[station].append(stop)
        return stop

    def add_station(self, station: str) -> str:
        """Create ``station`` with no stops, discarding any it already had"""
        self.stops_per_station[station] = []
        return station

    def get_stops(self, station: str) -> List[Stop]:
        return list(self.stops_per_station.get(station, []))

    def get_sliced_timetable(self, from_: dtime, to: dtime) -> "Timetable":
        """Independent copy restricted to [from_, to], each station sorted by time.

        Every station is kept, including those left without stops.
        """
        sliced = Timetable.create(from_, to)
        for station, stops in self.stops_per_station.items():
            # sorted() is stable, same-minute stops keep insertion order
            sliced.stops_per_station[station] = sorted(
                get_stops_between(stops, from_, to),
                key=lambda stop: seconds_of_day(stop.time)
            )
        return sliced

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    def to_text(self) -> str:
        buffer = StringIO()
        buffer.write(" ".join([
            "\nDEPARTURES FROM", format_hour_minute(self.from_),
            "to", format_hour_minute(self.to), "\n"
        ]))

        for station, stops in self.stops_per_station.items():
            buffer.write(f"\nSTATION: {station}\n")
            if stops:
                for stop in stops:
                    buffer.write(f"{format_hour_minute(stop.time)} - {stop.route_name}\n")
            else:
                buffer.write(f"{NO_DEPARTURES}\n")
            buffer.write(f"{SEPARATOR}\n")

        return buffer.getvalue()

    def get_json_timetable(self, from_: dtime, to: dtime) -> str:
        return self.get_sliced_timetable(from_, to).to_json()

    def get_text_timetable(self, from_: dtime, to: dtime) -> str:
        return self.get_sliced_timetable(from_, to).to_text()
