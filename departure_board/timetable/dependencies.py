from fastapi import Request

from departure_board.config import Settings
from departure_board.timetable.service import TimetableStore

def get_timetable_store(request: Request) -> TimetableStore:
    """The store owned by the running app"""
    return request.app.state.timetable_store

def get_settings(request: Request) -> Settings:
    return request.app.state.settings
