"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from cwaweather.config.defaults import (
    CWA_API_BASE_URL,
    DEFAULT_ENVIRONMENT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    FORECAST_36H_DATASET_ID,
)


class UpstreamConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = CWA_API_BASE_URL
    dataset_id: str = FORECAST_36H_DATASET_ID
    timeout_seconds: float | None = Field(default=None, gt=0.0)  # None = no timeout


class ProxyConfig(BaseModel):
    model_config = {"extra": "forbid"}

    cwa_api_key: str = ""
    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    environment: str = DEFAULT_ENVIRONMENT
    upstream: UpstreamConfig = UpstreamConfig()

    @property
    def has_api_key(self) -> bool:
        return bool(self.cwa_api_key.strip())
