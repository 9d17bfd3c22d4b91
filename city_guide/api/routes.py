# city_guide/api/routes.py

from typing import Any, Dict, List, Optional

import httpx
from fastapi import APIRouter, Depends, Query, Response

from city_guide.agents.travel_agent import TravelAgent
from city_guide.api.dependencies import get_settings, get_transport, get_travel_agent
from city_guide.core.config import Settings
from city_guide.core.errors import MissingInputError
from city_guide.core.logging_config import logger
from city_guide.models.schemas import (
    CityBundle,
    DiagnosticsReport,
    HotelRecommendation,
    PlacesResponse,
    RestaurantRecommendation,
)
from city_guide.services import gemini_client
from city_guide.services.openweather_client import get_weather_data

router = APIRouter()

FALLBACK_HEADER = "X-Recommendations-Fallback"


@router.get("/weather")
async def weather_endpoint(
    city: Optional[str] = Query(None, description="City name"),
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
) -> Dict[str, Any]:
    """
    OpenWeatherMap passthrough.
    Example: /weather?city=Paris
    """
    if not city or not city.strip() or not settings.WEATHER_API:
        raise MissingInputError("Missing city or API key")

    return await get_weather_data(city.strip(), settings, transport=transport)


@router.get("/places", response_model=PlacesResponse)
async def places_endpoint(
    city: Optional[str] = Query(None, description="City name"),
    agent: TravelAgent = Depends(get_travel_agent),
):
    """
    Coordinates for the city plus 5 attractions.
    Example: /places?city=Paris
    """
    return await agent.get_places(city)


@router.get("/hotels", response_model=List[HotelRecommendation])
async def hotels_endpoint(
    response: Response,
    location_id: Optional[str] = Query(None),
    latitude: Optional[str] = Query(None),
    longitude: Optional[str] = Query(None),
    agent: TravelAgent = Depends(get_travel_agent),
):
    """Always 200: failures degrade to an empty or fallback list."""
    logger.info(
        f"Hotels request - location_id: {location_id}, lat: {latitude}, lon: {longitude}"
    )
    result = await agent.recommendation_agent.get_hotels(latitude, longitude)
    response.headers[FALLBACK_HEADER] = str(result.is_fallback).lower()
    return result.items


@router.get("/restaurants", response_model=List[RestaurantRecommendation])
async def restaurants_endpoint(
    response: Response,
    location_id: Optional[str] = Query(None),
    latitude: Optional[str] = Query(None),
    longitude: Optional[str] = Query(None),
    agent: TravelAgent = Depends(get_travel_agent),
):
    """Always 200: failures degrade to an empty or fallback list."""
    logger.info(
        f"Restaurants request - location_id: {location_id}, lat: {latitude}, lon: {longitude}"
    )
    result = await agent.recommendation_agent.get_restaurants(latitude, longitude)
    response.headers[FALLBACK_HEADER] = str(result.is_fallback).lower()
    return result.items


@router.get("/bundle", response_model=CityBundle)
async def bundle_endpoint(
    city: Optional[str] = Query(None, description="City name"),
    agent: TravelAgent = Depends(get_travel_agent),
):
    """
    Weather, attractions, hotels and restaurants for a city in one call.
    Example: /bundle?city=Paris
    """
    return await agent.get_city_bundle(city)


@router.get("/test", response_model=DiagnosticsReport)
async def diagnostics_endpoint(
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
):
    """Provider key presence plus a live Gemini probe."""
    gemini_result = await gemini_client.probe(settings, transport=transport)

    return DiagnosticsReport(
        hasWeatherAPI=bool(settings.WEATHER_API),
        hasGeminiAPI=bool(settings.GEMINI_API_KEY),
        weatherAPILength=len(settings.WEATHER_API or ""),
        geminiAPILength=len(settings.GEMINI_API_KEY or ""),
        geminiTestResult=gemini_result,
    )
