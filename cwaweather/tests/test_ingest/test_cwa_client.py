"""Tests for the CWA API client with mocked httpx."""

import asyncio

import httpx
import pytest
import respx

from cwaweather.ingest.cwa_client import CwaClient

BASE_URL = "https://test-cwa.example.com/api"
DATASET_URL = f"{BASE_URL}/v1/rest/datastore/F-C0032-001"


@pytest.fixture
def cwa() -> CwaClient:
    return CwaClient(base_url=BASE_URL)


class TestGetForecast:
    def test_dataset_url(self):
        assert CwaClient(base_url=BASE_URL + "/").dataset_url == DATASET_URL

    @respx.mock
    def test_success(self, cwa: CwaClient, cwa_forecast: dict):
        respx.get(DATASET_URL).mock(
            return_value=httpx.Response(200, json=cwa_forecast)
        )

        result = asyncio.run(cwa.get_forecast("CWA-KEY"))
        assert "records" in result
        assert len(result["records"]["location"]) == 2

    @respx.mock
    def test_authorization_query_param(self, cwa: CwaClient, cwa_forecast: dict):
        route = respx.get(DATASET_URL).mock(
            return_value=httpx.Response(200, json=cwa_forecast)
        )

        asyncio.run(cwa.get_forecast("CWA-KEY"))
        assert route.called
        request = route.calls[0].request
        assert request.url.params["Authorization"] == "CWA-KEY"

    @respx.mock
    def test_no_retry_on_503(self, cwa: CwaClient):
        route = respx.get(DATASET_URL).mock(return_value=httpx.Response(503))

        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(cwa.get_forecast("CWA-KEY"))
        assert route.call_count == 1

    @respx.mock
    def test_network_error_propagates(self, cwa: CwaClient):
        respx.get(DATASET_URL).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(httpx.ConnectError):
            asyncio.run(cwa.get_forecast("CWA-KEY"))
