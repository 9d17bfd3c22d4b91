# city_guide/main.py

from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from city_guide.agents.travel_agent import TravelAgent
from city_guide.api.routes import router
from city_guide.core.config import Settings
from city_guide.core.errors import CityGuideError
from city_guide.core.logging_config import configure_logging, logger


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the API. Settings are read once here and shared through app.state;
    ``transport`` is handed to every outbound httpx client.
    """
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="City Guide Backend",
        version="0.1.0",
    )

    app.state.settings = settings
    app.state.transport = transport
    app.state.travel_agent = TravelAgent(settings, transport=transport)

    # Frontend dev server runs on another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CityGuideError)
    async def city_guide_error_handler(request: Request, exc: CityGuideError):
        logger.warning(
            f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}"
        )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "City Guide backend API is running!"

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("city_guide.main:app", host="0.0.0.0", port=5000, reload=True)
