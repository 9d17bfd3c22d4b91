# city_guide/agents/recommendation_agent.py

from typing import Any, Callable, Dict, List, Optional, Type

import httpx
from pydantic import BaseModel

from city_guide.agents.fallbacks import (
    fallback_hotels,
    fallback_places,
    fallback_restaurants,
)
from city_guide.core.config import Settings
from city_guide.core.errors import LanguageModelError
from city_guide.core.logging_config import logger
from city_guide.models.schemas import (
    HotelRecommendation,
    PlaceRecommendation,
    RecommendationResult,
    RestaurantRecommendation,
)
from city_guide.services.gemini_client import generate_text
from city_guide.services.json_extractor import extract_json_array

MAX_RECOMMENDATIONS = 5

PLACES_PROMPT = """Generate 5 top tourist attractions and places to visit in {city}.
For each place, provide:
1. Name of the place
2. Brief description (what makes it special)

Format the response as a JSON array with objects containing "name" and "secondaryInfo" fields.
Example format:
[
  {{
    "name": "Place Name",
    "secondaryInfo": "Brief description of the place"
  }}
]

Make sure the response is valid JSON only, no additional text."""

HOTELS_PROMPT = """Generate 5 recommended hotels for tourists visiting this location (coordinates: {latitude}, {longitude}).
For each hotel, provide:
1. Hotel name
2. Brief description of location/area
3. Approximate price range (Budget, Mid-range, Luxury)
4. Rating (1-5 stars)

Format the response as a JSON array with objects containing "name", "address", "rating", and "price" fields.
Example format:
[
  {{
    "name": "Hotel Name",
    "address": "Location description",
    "rating": "4.5",
    "price": "Mid-range"
  }}
]

Make sure the response is valid JSON only, no additional text."""

RESTAURANTS_PROMPT = """Generate 5 recommended restaurants for tourists visiting this location (coordinates: {latitude}, {longitude}).
For each restaurant, provide:
1. Restaurant name
2. Type of cuisine
3. Brief description of location
4. Rating (1-5 stars)

Format the response as a JSON array with objects containing "name", "cuisine", "rating", and "address" fields.
Example format:
[
  {{
    "name": "Restaurant Name",
    "cuisine": "Italian",
    "rating": "4.5",
    "address": "Location description"
  }}
]

Make sure the response is valid JSON only, no additional text."""


def build_recommendation(
    model: Type[BaseModel], raw: Dict[str, Any]
) -> BaseModel:
    """
    Build a recommendation from a model-supplied object.

    Only the model's declared fields are taken. Missing, null or empty
    values fall back to the field default; everything else is stringified
    (ratings often arrive as numbers). ``image`` is never taken from the
    provider.
    """
    values: Dict[str, str] = {}
    for field_name in model.model_fields:
        if field_name == "image":
            continue
        value = raw.get(field_name)
        if value is None or value == "" or isinstance(value, (dict, list)):
            continue
        values[field_name] = str(value)
    return model(**values)


class RecommendationAgent:
    """
    Child agent that asks Gemini for attractions, hotels and restaurants.

    Every method returns a RecommendationResult and never raises for
    provider problems: failures degrade to the deterministic fallback list
    (is_fallback=True) or, for hotels/restaurants without an API key, to an
    empty list.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self.transport = transport

    async def get_places(self, city: str) -> RecommendationResult:
        logger.info(f"Getting places recommendations for {city} using Gemini API")
        return await self._recommend(
            category="places",
            prompt=PLACES_PROMPT.format(city=city),
            model=PlaceRecommendation,
            fallback=lambda: fallback_places(city),
        )

    async def get_hotels(
        self, latitude: float | str | None, longitude: float | str | None
    ) -> RecommendationResult:
        if not self.settings.GEMINI_API_KEY:
            logger.warning("Hotels: missing Gemini API key. Returning empty list.")
            return RecommendationResult()

        logger.info(f"Getting hotel recommendations near ({latitude}, {longitude})")
        return await self._recommend(
            category="hotels",
            prompt=HOTELS_PROMPT.format(latitude=latitude, longitude=longitude),
            model=HotelRecommendation,
            fallback=fallback_hotels,
        )

    async def get_restaurants(
        self, latitude: float | str | None, longitude: float | str | None
    ) -> RecommendationResult:
        if not self.settings.GEMINI_API_KEY:
            logger.warning(
                "Restaurants: missing Gemini API key. Returning empty list."
            )
            return RecommendationResult()

        logger.info(
            f"Getting restaurant recommendations near ({latitude}, {longitude})"
        )
        return await self._recommend(
            category="restaurants",
            prompt=RESTAURANTS_PROMPT.format(latitude=latitude, longitude=longitude),
            model=RestaurantRecommendation,
            fallback=fallback_restaurants,
        )

    async def _recommend(
        self,
        category: str,
        prompt: str,
        model: Type[BaseModel],
        fallback: Callable[[], List[BaseModel]],
    ) -> RecommendationResult:
        try:
            text = await generate_text(prompt, self.settings, transport=self.transport)
        except LanguageModelError as exc:
            logger.error(f"Gemini {category} fetch error: {exc.message}")
            return RecommendationResult(items=fallback(), is_fallback=True)

        raw_items = extract_json_array(text)
        if raw_items is None:
            logger.warning(
                f"Could not extract a JSON array from Gemini {category} response, "
                "using fallback list"
            )
            return RecommendationResult(items=fallback(), is_fallback=True)

        items = [
            build_recommendation(model, raw)
            for raw in raw_items[:MAX_RECOMMENDATIONS]
        ]
        logger.info(f"Found {len(items)} {category}")
        return RecommendationResult(items=items)
