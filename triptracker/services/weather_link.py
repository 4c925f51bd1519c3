"""
Weather link-out and route map embed, driven by static settings.
"""

from typing import Optional

from pydantic import BaseModel

from triptracker.core.config import Settings, get_settings

PLACEMENTS = ("navbar", "sidebar", "trip_card")


class WeatherLink(BaseModel):
    url: str
    label: str
    new_tab: bool


def weather_link(placement: str, settings: Optional[Settings] = None) -> Optional[WeatherLink]:
    """The link to show at placement, or None when it is switched off."""
    settings = settings or get_settings()
    if placement not in PLACEMENTS:
        raise ValueError(f"Unknown placement: {placement}")

    shown = {
        "navbar": settings.WEATHER_SHOW_IN_NAVBAR,
        "sidebar": settings.WEATHER_SHOW_IN_SIDEBAR,
        "trip_card": settings.WEATHER_SHOW_IN_TRIP_CARDS,
    }[placement]

    if not (settings.WEATHER_ENABLED and settings.WEATHER_APP_URL and shown):
        return None

    return WeatherLink(
        url=settings.WEATHER_APP_URL,
        label=settings.WEATHER_BUTTON_TEXT or "🌤️ Weather",
        new_tab=settings.WEATHER_OPEN_IN_NEW_TAB,
    )


def map_embed_url(settings: Optional[Settings] = None) -> str:
    return (settings or get_settings()).MAP_EMBED_URL
