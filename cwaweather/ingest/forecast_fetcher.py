"""Forecast fetcher: one CWA call, reshaped into the all-city response body."""

import logging

from cwaweather.config.schema import ProxyConfig
from cwaweather.errors import (
    ForecastFetchError,
    MissingCredentialError,
    NoForecastDataError,
)
from cwaweather.ingest.cwa_client import CwaClient
from cwaweather.ingest.reshape import parse_records, reshape_all

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, config: ProxyConfig, cwa_client: CwaClient | None = None):
        self.config = config
        self.cwa = cwa_client or CwaClient(
            base_url=config.upstream.base_url,
            dataset_id=config.upstream.dataset_id,
            timeout=config.upstream.timeout_seconds,
        )

    async def fetch_all(self) -> dict:
        """Fetch and reshape forecasts for every city.

        Raises MissingCredentialError before any outbound call when no API
        key is configured, NoForecastDataError when the dataset has no
        locations, and ForecastFetchError for every other failure.
        """
        if not self.config.has_api_key:
            raise MissingCredentialError()

        try:
            raw = await self.cwa.get_forecast(self.config.cwa_api_key)
            records = parse_records(raw)
            if not records.locations:
                raise NoForecastDataError()
            cities = reshape_all(records)
        except NoForecastDataError:
            logger.warning("CWA %s returned no locations", self.cwa.dataset_id)
            raise
        except Exception as e:
            logger.error("Failed to fetch all-city forecast: %s", e)
            raise ForecastFetchError() from e

        return {
            "success": True,
            "updateTime": records.dataset_description,
            "data": [city.to_dict() for city in cities],
        }
