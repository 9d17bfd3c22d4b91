# city_guide/services/openweather_client.py

from typing import Any, Dict, Optional, Tuple

import httpx

from city_guide.core.config import Settings
from city_guide.core.errors import WeatherLookupError
from city_guide.core.logging_config import logger
from city_guide.models.schemas import WeatherReport, coordinates_from


async def get_weather_data(
    city: str,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """
    Fetch current conditions for a city from OpenWeatherMap.

    Returns the provider JSON untouched. Raises WeatherLookupError on any
    transport failure, non-2xx status or undecodable body.
    """
    params = {
        "q": city,
        "appid": settings.WEATHER_API,
        "units": "metric",
    }

    try:
        async with httpx.AsyncClient(
            timeout=settings.WEATHER_TIMEOUT, transport=transport
        ) as client:
            response = await client.get(settings.OPENWEATHER_URL, params=params)
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.error(
            f"OpenWeatherMap returned {exc.response.status_code} for {city!r}: "
            f"{exc.response.text}"
        )
        raise WeatherLookupError("Weather fetch failed") from exc
    except httpx.HTTPError as exc:
        logger.error(f"OpenWeatherMap request failed for {city!r}: {exc}")
        raise WeatherLookupError("Weather fetch failed") from exc

    try:
        data = response.json()
    except ValueError as exc:
        logger.error(f"OpenWeatherMap returned a non-JSON body for {city!r}")
        raise WeatherLookupError("Weather fetch failed") from exc

    if not isinstance(data, dict):
        logger.error(f"OpenWeatherMap returned unexpected payload for {city!r}")
        raise WeatherLookupError("Weather fetch failed")

    return data


async def get_weather_report(
    city: str,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> WeatherReport:
    data = await get_weather_data(city, settings, transport=transport)

    try:
        report = WeatherReport.from_provider(data)
    except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
        logger.error(f"Error parsing OpenWeatherMap response for {city!r}: {exc}")
        raise WeatherLookupError("Failed to get coordinates for the city") from exc

    logger.info(
        f"OpenWeatherMap {city!r} -> {report.temperature}°C, {report.condition}, "
        f"lat={report.latitude}, lon={report.longitude}"
    )
    return report


async def get_coordinates(
    city: str,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Tuple[float, float]:
    """Only the ``coord`` block is read; the rest of the payload may be anything."""
    data = await get_weather_data(city, settings, transport=transport)

    try:
        latitude, longitude = coordinates_from(data)
    except ValueError as exc:
        logger.error(f"No coordinates in OpenWeatherMap response for {city!r}: {exc}")
        raise WeatherLookupError("Failed to get coordinates for the city") from exc

    logger.info(f"OpenWeatherMap {city!r} -> lat={latitude}, lon={longitude}")
    return latitude, longitude
