"""
Client configuration using pydantic-settings.
All config is loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Trip Tracker"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Resource API (json-server style)
    API_BASE_URL: str = "http://localhost:3000"
    HTTP_TIMEOUT: Optional[float] = None  # None = wait forever

    # Session storage
    SESSION_BACKEND: str = "file"  # file, redis, memory
    SESSION_KEY: str = "currentUser"
    SESSION_FILE: str = ".triptracker/local_storage.json"
    REDIS_URL: str = "redis://localhost:6379/0"

    # Weather link-out
    WEATHER_ENABLED: bool = True
    WEATHER_APP_URL: str = "https://weather-app-five-mu-20.vercel.app/"
    WEATHER_OPEN_IN_NEW_TAB: bool = True
    WEATHER_BUTTON_TEXT: str = "🌤️ Check Weather"
    WEATHER_SHOW_IN_NAVBAR: bool = True
    WEATHER_SHOW_IN_SIDEBAR: bool = True
    WEATHER_SHOW_IN_TRIP_CARDS: bool = False

    # Route map embed
    MAP_EMBED_URL: str = "https://www.google.com/maps/embed"

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
