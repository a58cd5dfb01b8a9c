import logging
from datetime import time
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status, Query
from fastapi.responses import PlainTextResponse, Response

from departure_board.config import Settings
from departure_board.timeutils import ParseError, parse_hour_minute, parse_param_to_time, window_end
from departure_board.timetable.dependencies import get_settings, get_timetable_store
from departure_board.timetable.service import TimetableStore

logger = logging.getLogger(__name__)

router = APIRouter()

def _parse_time(value: Optional[str], name: str) -> time:
    try:
        return parse_param_to_time(value)
    except ParseError as exc:
        logger.warning("Rejected %s=%r: %s", name, value, exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {name} time '{value}'. Use hour:minute, e.g. 9:05 or 13:30."
        )

def render_board(
    store: TimetableStore,
    settings: Settings,
    from_: Optional[str],
    format: Optional[str]
) -> Response:
    """Render the departures from ``from_`` (default now) for the configured window"""
    start = _parse_time(from_, "from")
    end = window_end(start, settings.WINDOW_MINUTES)
    if format and format.lower() == "json":
        return Response(content=store.get_json_timetable(start, end), media_type="application/json")
    return PlainTextResponse(store.get_text_timetable(start, end))

@router.get("/")
def get_departures(
    from_: Optional[str] = Query(None, alias="from", description="Start of the window as hour:minute, defaults to now"),
    format: Optional[str] = Query(None, description="'json' for JSON, anything else for text"),
    store: TimetableStore = Depends(get_timetable_store),
    settings: Settings = Depends(get_settings)
):
    """Departures in the window starting at ``from``"""
    return render_board(store, settings, from_, format)

@router.get("/add")
def add_stop(
    routeName: str = Query(..., description="Route the stop belongs to"),
    station: str = Query(..., min_length=1, description="Station name"),
    departure_time: str = Query(..., alias="time", description="Departure time as hour:minute"),
    from_: Optional[str] = Query(None, alias="from", description="Start of the window to render"),
    format: Optional[str] = Query(None, description="'json' for JSON, anything else for text"),
    store: TimetableStore = Depends(get_timetable_store),
    settings: Settings = Depends(get_settings)
):
    """Add a stop, then render the board"""
    try:
        departure = parse_hour_minute(departure_time)
    except ParseError as exc:
        logger.warning("Could not add stop for %s at %s: %s", routeName, station, exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Something went wrong when adding the stop. Error message: {exc}"
        )

    store.add_stop(routeName, station, departure)
    return render_board(store, settings, from_, format)

@router.get("/addStation")
def add_station(
    station: str = Query(..., min_length=1, description="Station name"),
    from_: Optional[str] = Query(None, alias="from", description="Start of the window to render"),
    format: Optional[str] = Query(None, description="'json' for JSON, anything else for text"),
    store: TimetableStore = Depends(get_timetable_store),
    settings: Settings = Depends(get_settings)
):
    """Create a station with no stops (resets an existing one), then render the board"""
    store.add_station(station)
    return render_board(store, settings, from_, format)

@router.get("/addSample")
def add_sample(
    from_: Optional[str] = Query(None, alias="from", description="Start of the window to render"),
    format: Optional[str] = Query(None, description="'json' for JSON, anything else for text"),
    store: TimetableStore = Depends(get_timetable_store),
    settings: Settings = Depends(get_settings)
):
    """Load the sample departures, then render the board"""
    store.load_sample()
    return render_board(store, settings, from_, format)
