# city_guide/core/errors.py


class CityGuideError(Exception):
    """Base error; carries the HTTP status and the message sent to clients."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingInputError(CityGuideError):
    status_code = 400


class WeatherLookupError(CityGuideError):
    """Weather provider unavailable or returned unusable data."""

    status_code = 500


class LanguageModelError(CityGuideError):
    """Gemini call failed. Never reaches a client; recommendations degrade."""

    status_code = 502
