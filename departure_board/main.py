import logging
from typing import Optional

from fastapi import FastAPI

from departure_board.config import Settings, settings as default_settings
from departure_board.logging_utils import configure_logging
from departure_board.timetable import router as timetable_router
from departure_board.timetable.service import TimetableStore

logger = logging.getLogger(__name__)

def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[TimetableStore] = None
) -> FastAPI:
    """Build the app around its own timetable store"""
    if app_settings is None:
        app_settings = default_settings
    if store is None:
        store = TimetableStore()

    configure_logging(app_settings.log_level)

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        debug=app_settings.DEBUG,
        version="1.0.0",
        description="In-memory departure board API",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.settings = app_settings
    app.state.timetable_store = store

    if app_settings.LOAD_SAMPLE_ON_STARTUP:
        store.load_sample()

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    # Board routes are mounted at the root, "/" is the board itself
    app.include_router(
        timetable_router,
        tags=["Departures"]
    )

    logger.info("%s ready (%s)", app_settings.PROJECT_NAME, app_settings.ENVIRONMENT)
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
