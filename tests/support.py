# tests/support.py

import json
from typing import List, Optional

import httpx

from city_guide.core.config import Settings

PARIS_WEATHER = {
    "coord": {"lon": 2.35, "lat": 48.85},
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky"}],
    "main": {"temp": 18.2, "humidity": 60},
    "wind": {"speed": 3.1},
    "name": "Paris",
}

PLACES_JSON = [
    {"name": "Eiffel Tower", "secondaryInfo": "Iron lattice tower"},
    {"name": "Louvre Museum", "secondaryInfo": "Home of the Mona Lisa"},
    {"name": "Notre-Dame", "secondaryInfo": "Gothic cathedral"},
    {"name": "Montmartre", "secondaryInfo": "Artists' hill"},
    {"name": "Sainte-Chapelle", "secondaryInfo": "Stained glass"},
]

HOTELS_JSON = [
    {"name": "Hotel Lutetia", "address": "Saint-Germain", "rating": 4.7, "price": "Luxury"},
    {"name": "Hotel Ibis", "address": "Gare de Lyon", "rating": "3.9", "price": "Budget"},
]

RESTAURANTS_JSON = [
    {"name": "Le Procope", "cuisine": "French", "rating": "4.3", "address": "Odeon"},
]


def make_settings(**overrides) -> Settings:
    values = {"WEATHER_API": "weather-key", "GEMINI_API_KEY": "gemini-key"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def gemini_reply(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def prompt_of(request: httpx.Request) -> str:
    return json.loads(request.content)["contents"][0]["parts"][0]["text"]


def fenced(items) -> str:
    return "Here you go:\n```json\n" + json.dumps(items) + "\n```"


class FakeProviders:
    """
    MockTransport handler standing in for OpenWeatherMap and Gemini.

    ``weather`` is a payload dict, an int status code, or an exception.
    ``gemini`` maps a category ("places", "hotels", "restaurants", "probe")
    to reply text, an int status code, or an exception.
    """

    def __init__(self, weather=PARIS_WEATHER, gemini: Optional[dict] = None) -> None:
        self.weather = weather
        self.gemini = gemini or {}
        self.requests: List[httpx.Request] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def gemini_calls(self) -> List[str]:
        return [
            category_of(prompt_of(r))
            for r in self.requests
            if r.url.host == "generativelanguage.googleapis.com"
        ]

    def weather_calls(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.host == "api.openweathermap.org"]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "api.openweathermap.org":
            return _respond(request, self.weather, json_body=True)
        outcome = self.gemini.get(category_of(prompt_of(request)), 500)
        return _respond(request, outcome, json_body=False)


def category_of(prompt: str) -> str:
    if "hotels" in prompt:
        return "hotels"
    if "restaurants" in prompt:
        return "restaurants"
    if "tourist attractions" in prompt:
        return "places"
    return "probe"


def _respond(request: httpx.Request, outcome, json_body: bool) -> httpx.Response:
    if isinstance(outcome, Exception):
        if isinstance(outcome, httpx.RequestError):
            outcome.request = request
        raise outcome
    if isinstance(outcome, int):
        return httpx.Response(outcome, json={"error": {"code": outcome}})
    if callable(outcome):
        return outcome(request)
    if json_body:
        return httpx.Response(200, json=outcome)
    return httpx.Response(200, json=gemini_reply(outcome))
