"""CWA weather proxy: FastAPI app serving reshaped 36-hour forecasts."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cwaweather.config.schema import ProxyConfig
from cwaweather.errors import ForecastError
from cwaweather.ingest.forecast_fetcher import ForecastFetcher
from cwaweather.models.common import utc_now_iso

logger = logging.getLogger(__name__)

ALL_CITY_WEATHER_PATH = "/api/weather/getAllCityWeather"
HEALTH_PATH = "/api/health"

WELCOME_MESSAGE = "歡迎使用 CWA 天氣預報 API"
NOT_FOUND_ERROR = "找不到此路徑"
SERVER_ERROR = "伺服器錯誤"


def create_app(
    config: ProxyConfig, fetcher: ForecastFetcher | None = None
) -> FastAPI:
    """Build the app around an explicit config; nothing is read from globals."""
    app = FastAPI(title="CWA Weather Proxy", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.config = config
    app.state.fetcher = fetcher or ForecastFetcher(config)

    @app.get("/")
    def index():
        return {
            "message": WELCOME_MESSAGE,
            "endpoints": {
                "all": ALL_CITY_WEATHER_PATH,
                "health": HEALTH_PATH,
            },
        }

    @app.get(HEALTH_PATH)
    def health():
        return {"status": "OK", "timestamp": utc_now_iso()}

    @app.get(ALL_CITY_WEATHER_PATH)
    async def get_all_city_weather(request: Request):
        try:
            return await request.app.state.fetcher.fetch_all()
        except ForecastError as e:
            return JSONResponse(status_code=e.status_code, content=e.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        # Unknown path and unknown method on a known path are both "no route".
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"error": NOT_FOUND_ERROR})
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": SERVER_ERROR, "message": str(exc)},
        )

    return app
