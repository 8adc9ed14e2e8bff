"""CWA open-data API client for the 36-hour forecast dataset."""

import logging

import httpx

from cwaweather.config.defaults import CWA_API_BASE_URL, FORECAST_36H_DATASET_ID

logger = logging.getLogger(__name__)


class CwaClient:
    def __init__(
        self,
        base_url: str = CWA_API_BASE_URL,
        dataset_id: str = FORECAST_36H_DATASET_ID,
        timeout: float | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.dataset_id = dataset_id
        self.timeout = timeout

    @property
    def dataset_url(self) -> str:
        return f"{self.base_url}/v1/rest/datastore/{self.dataset_id}"

    async def get_forecast(self, api_key: str) -> dict:
        """Fetch the raw dataset in a single attempt. No retries.

        Raises httpx.HTTPStatusError on non-2xx responses and
        httpx.RequestError on transport failures.
        """
        params = {"Authorization": api_key}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(self.dataset_url, params=params)
        logger.debug("CWA %s returned %d", self.dataset_id, resp.status_code)
        resp.raise_for_status()
        return resp.json()
