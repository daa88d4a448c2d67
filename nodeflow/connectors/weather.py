# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""Current conditions from OpenWeather."""

from typing import Any, Dict, Optional

from nodeflow.core.logging import get_engine_logger
from .base import Connector

logger = get_engine_logger("connectors.weather")


class WeatherConnector(Connector):
    name = "weather"
    label = "Weather API"

    @property
    def configured(self) -> bool:
        return bool(self.credentials.openweather_api_key)

    async def fetch(self, location: Optional[str], units: str = "imperial") -> Dict[str, Any]:
        if not self.configured:
            logger.warning("OpenWeather API key not configured, returning mock data")
            return {
                "location": location,
                "temperature": 72,
                "condition": "Sunny",
                "humidity": 65,
                "wind": 10,
                "units": units,
                "simulated": True,
            }

        response = await self._request(
            "GET",
            self.config.weather_api_url,
            params={
                "q": location,
                "appid": self.credentials.openweather_api_key,
                "units": units,
            }
        )
        data = response.json()

        weather = (data.get("weather") or [{}])[0]
        main = data.get("main", {})
        return {
            "location": data.get("name"),
            "temperature": main.get("temp"),
            "condition": weather.get("main") or "Unknown",
            "description": weather.get("description") or "",
            "humidity": main.get("humidity"),
            "wind": data.get("wind", {}).get("speed"),
            "units": units,
        }
