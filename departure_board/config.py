import logging
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Application
    PROJECT_NAME: str = "Departure Board"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Board
    WINDOW_MINUTES: int = Field(60, ge=0)  # Length of the window shown after "from"
    LOAD_SAMPLE_ON_STARTUP: bool = False

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @property
    def log_level(self) -> int:
        return getattr(logging, self.LOG_LEVEL)

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
