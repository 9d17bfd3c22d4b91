# city_guide/api/dependencies.py

from typing import Optional

import httpx
from fastapi import Request

from city_guide.agents.travel_agent import TravelAgent
from city_guide.core.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_transport(request: Request) -> Optional[httpx.AsyncBaseTransport]:
    return request.app.state.transport


def get_travel_agent(request: Request) -> TravelAgent:
    return request.app.state.travel_agent
