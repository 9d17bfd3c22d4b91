# city_guide/models/schemas.py

from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field


def coordinates_from(data: Dict[str, Any]) -> Tuple[float, float]:
    """
    Read (lat, lon) from the payload's ``coord`` block, ignoring everything
    else. Raises ValueError when it is missing or malformed.
    """
    coord = data.get("coord")
    if not isinstance(coord, dict):
        raise ValueError("payload has no 'coord' object")
    try:
        return float(coord["lat"]), float(coord["lon"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"malformed 'coord' object: {coord!r}") from exc


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


class WeatherReport(BaseModel):
    # Readings the provider omits stay None
    city: str = ""
    temperature: Optional[float] = None
    condition: Optional[str] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    latitude: float
    longitude: float

    @classmethod
    def from_provider(cls, data: Dict[str, Any]) -> "WeatherReport":
        """
        Build a report from an OpenWeatherMap /weather payload.
        Only ``coord`` is required; raises ValueError when it is unusable
        or a reading has the wrong type.
        """
        latitude, longitude = coordinates_from(data)
        main = _section(data, "main")
        wind = _section(data, "wind")

        conditions = data.get("weather")
        first = conditions[0] if isinstance(conditions, list) and conditions else None
        condition = first.get("description") if isinstance(first, dict) else None

        name = data.get("name")
        return cls(
            city=name if isinstance(name, str) else "",
            temperature=main.get("temp"),
            condition=condition,
            humidity=main.get("humidity"),
            wind_speed=wind.get("speed"),
            latitude=latitude,
            longitude=longitude,
        )


class PlaceRecommendation(BaseModel):
    name: str = "Unnamed Place"
    secondaryInfo: str = "N/A"


class HotelRecommendation(BaseModel):
    name: str = "Unnamed Hotel"
    rating: str = "N/A"
    price: str = "N/A"
    image: str = ""
    address: str = "Address not available"


class RestaurantRecommendation(BaseModel):
    name: str = "Unnamed Restaurant"
    cuisine: str = "N/A"
    rating: str = "N/A"
    image: str = ""
    address: str = "Address not available"


class RecommendationResult(BaseModel):
    items: List[Any] = Field(default_factory=list)
    is_fallback: bool = False


class PlacesDebug(BaseModel):
    hasGeoId: bool = True
    geoIdValue: str = "gemini-api"
    placesCount: int = 0
    isFallback: bool = False


class PlacesResponse(BaseModel):
    places: List[PlaceRecommendation]
    location_id: str = "gemini-api"
    latitude: float
    longitude: float
    is_fallback: bool = False
    debug: PlacesDebug


class CityBundle(BaseModel):
    city: str
    weather: WeatherReport
    places: List[PlaceRecommendation] = Field(default_factory=list)
    hotels: List[HotelRecommendation] = Field(default_factory=list)
    restaurants: List[RestaurantRecommendation] = Field(default_factory=list)
    fallbacks: Dict[str, bool] = Field(default_factory=dict)
    status: Literal["complete", "partial"] = "complete"
    notice: str = ""


class DiagnosticsReport(BaseModel):
    message: str = "Server is running"
    hasWeatherAPI: bool
    hasGeminiAPI: bool
    weatherAPILength: int
    geminiAPILength: int
    geminiTestResult: str
