"""
Client for the external weather service.
"""
import logging
from typing import Any, Optional
import httpx

from ..core.config import get_settings
from ..core.exceptions import UpstreamServiceError

logger = logging.getLogger(__name__)
settings = get_settings()


class WeatherClient:
    """Fetches today's weather from the weather service.

    The service answers with a JSON array of ``{"date": ..., "weather": ...}``
    objects; the first element is today's entry.
    """

    def __init__(self, client: Optional[httpx.Client] = None, url: Optional[str] = None):
        self.url = url or settings.weather_api_url
        self.client = client or httpx.Client(timeout=settings.weather_timeout)

    def close(self):
        self.client.close()

    def get_today_weather(self) -> str:
        try:
            response = self.client.get(self.url)
        except httpx.HTTPError as e:
            logger.warning(f"Weather service request failed: {e}")
            raise UpstreamServiceError(
                "Failed to fetch weather data", {"url": self.url}
            ) from e

        if not response.is_success:
            logger.warning(f"Weather service returned status {response.status_code}")
            raise UpstreamServiceError(
                f"Failed to fetch weather data. Status code: {response.status_code}",
                {"url": self.url, "status_code": response.status_code},
            )

        try:
            payload: Any = response.json()
        except ValueError as e:
            raise UpstreamServiceError("Weather data is not valid JSON", {"url": self.url}) from e

        if not isinstance(payload, list) or not payload:
            raise UpstreamServiceError("No weather data available", {"url": self.url})

        today = payload[0]
        weather = today.get("weather") if isinstance(today, dict) else None
        if not isinstance(weather, str) or not weather:
            raise UpstreamServiceError("Weather data is malformed", {"url": self.url})
        return weather


def get_weather_client():
    """FastAPI dependency yielding a client that is closed after the request."""
    client = WeatherClient()
    try:
        yield client
    finally:
        client.close()
