# city_guide/agents/travel_agent.py

import asyncio
from typing import Awaitable, Callable, Optional, Tuple, TypeVar

import httpx

from city_guide.agents.recommendation_agent import RecommendationAgent
from city_guide.core.config import Settings
from city_guide.core.errors import MissingInputError, WeatherLookupError
from city_guide.core.logging_config import logger
from city_guide.models.schemas import (
    CityBundle,
    PlacesDebug,
    PlacesResponse,
    RecommendationResult,
)
from city_guide.services.openweather_client import get_coordinates, get_weather_report

T = TypeVar("T")

WEATHER_ONLY_NOTICE = (
    "Only weather data was found. Places, hotels, and restaurants might not "
    "be available for this location."
)
PLACEHOLDER_NOTICE = (
    "Some recommendations could not be generated and show placeholder or "
    "no entries."
)


class TravelAgent:
    """
    Parent agent that:
      - looks up weather for a city (hard dependency: it supplies coordinates)
      - delegates attractions, hotels and restaurants to RecommendationAgent
      - merges everything into one response, tolerating per-category failure
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self.transport = transport
        self.recommendation_agent = RecommendationAgent(settings, transport=transport)

    # ---------------- Places (coordinates + attractions) ----------------

    async def get_places(self, city: Optional[str]) -> PlacesResponse:
        city = _require_city(city)

        latitude, longitude = await self._locate(get_coordinates, city)
        logger.info(f"Got coordinates from OpenWeather: lat={latitude}, lon={longitude}")

        result = await self.recommendation_agent.get_places(city)
        logger.info(f"Final result for {city}: places={len(result.items)}")

        return PlacesResponse(
            places=result.items,
            latitude=latitude,
            longitude=longitude,
            is_fallback=result.is_fallback,
            debug=PlacesDebug(
                placesCount=len(result.items),
                isFallback=result.is_fallback,
            ),
        )

    # ---------------- Full bundle ----------------

    async def get_city_bundle(self, city: Optional[str]) -> CityBundle:
        city = _require_city(city)

        weather = await self._locate(get_weather_report, city)

        places, hotels, restaurants = await asyncio.gather(
            self.recommendation_agent.get_places(city),
            self.recommendation_agent.get_hotels(weather.latitude, weather.longitude),
            self.recommendation_agent.get_restaurants(
                weather.latitude, weather.longitude
            ),
        )

        status, notice = _summarize(places, hotels, restaurants)

        bundle = CityBundle(
            city=weather.city or city,
            weather=weather,
            places=places.items,
            hotels=hotels.items,
            restaurants=restaurants.items,
            fallbacks={
                "places": places.is_fallback,
                "hotels": hotels.is_fallback,
                "restaurants": restaurants.is_fallback,
            },
            status=status,
            notice=notice,
        )

        logger.info(
            f"Bundle for {city}: places={len(bundle.places)}, "
            f"hotels={len(bundle.hotels)}, restaurants={len(bundle.restaurants)}, "
            f"status={bundle.status}"
        )
        return bundle

    async def _locate(self, lookup: Callable[..., Awaitable[T]], city: str) -> T:
        """Weather is a hard dependency: without coordinates nothing else runs."""
        if not self.settings.WEATHER_API:
            logger.error("Missing OpenWeatherMap API key, cannot locate city")
            raise WeatherLookupError("Failed to get coordinates for the city")

        try:
            return await lookup(city, self.settings, transport=self.transport)
        except WeatherLookupError as exc:
            logger.error(f"Failed to get coordinates from OpenWeather: {exc.message}")
            raise WeatherLookupError("Failed to get coordinates for the city") from exc


def _summarize(*results: RecommendationResult) -> Tuple[str, str]:
    """
    "complete" only when every category holds provider data. Fallback and
    empty categories make the bundle "partial".
    """
    real = [r for r in results if r.items and not r.is_fallback]
    if len(real) == len(results):
        return "complete", ""
    if not real:
        return "partial", WEATHER_ONLY_NOTICE
    return "partial", PLACEHOLDER_NOTICE


def _require_city(city: Optional[str]) -> str:
    city = (city or "").strip()
    if not city:
        raise MissingInputError("City is required")
    return city
