# city_guide/core/config.py

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # OpenWeatherMap key (query-parameter auth)
    WEATHER_API: str | None = None
    OPENWEATHER_URL: str = "https://api.openweathermap.org/data/2.5/weather"
    WEATHER_TIMEOUT: float = 10.0

    # Gemini generateContent REST API
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-1.5-flash"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1/models"
    GEMINI_TIMEOUT: float = 30.0
    GEMINI_PROBE_TIMEOUT: float = 10.0

    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def gemini_generate_url(self) -> str:
        return f"{self.GEMINI_BASE_URL}/{self.GEMINI_MODEL}:generateContent"
