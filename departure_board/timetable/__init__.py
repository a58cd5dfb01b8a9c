"""
Timetable Module

HTTP surface of the departure board. It includes:

- router.py: FastAPI endpoints for reading the board and adding stops
- service.py: TimetableStore, the lock-guarded owner of the board's timetable
- dependencies.py: FastAPI dependencies resolving the app's store and settings
"""

from .router import router
from .service import TimetableStore, SAMPLE_STOPS

__all__ = [
    "router",
    "TimetableStore",
    "SAMPLE_STOPS",
]
