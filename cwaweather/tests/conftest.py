"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from cwaweather.config.schema import ProxyConfig, UpstreamConfig

TEST_BASE_URL = "https://test-cwa.example.com/api"
TEST_DATASET_URL = f"{TEST_BASE_URL}/v1/rest/datastore/F-C0032-001"
TEST_API_KEY = "CWA-TEST-KEY"

SIX_KINDS = {
    "Wx": ["晴", "多雲", "陰"],
    "PoP": ["0", "30", "70"],
    "MinT": ["20", "18", "19"],
    "MaxT": ["28", "24", "26"],
    "CI": ["舒適", "稍有寒意", "舒適"],
    "WS": ["<= 1", "2-3", "4"],
}

WINDOWS = [
    ("2026-10-19 12:00:00", "2026-10-19 18:00:00"),
    ("2026-10-19 18:00:00", "2026-10-20 06:00:00"),
    ("2026-10-20 06:00:00", "2026-10-20 18:00:00"),
]


def make_element(name: str, values: list[str]) -> dict:
    return {
        "elementName": name,
        "time": [
            {
                "startTime": start,
                "endTime": end,
                "parameter": {"parameterName": value},
            }
            for (start, end), value in zip(WINDOWS, values)
        ],
    }


def make_payload(locations: list[dict], description: str = "三十六小時天氣預報") -> dict:
    return {
        "success": "true",
        "records": {"datasetDescription": description, "location": locations},
    }


@pytest.fixture
def six_kind_location() -> dict:
    return {
        "locationName": "臺中市",
        "weatherElement": [make_element(k, v) for k, v in SIX_KINDS.items()],
    }


@pytest.fixture
def six_kind_payload(six_kind_location: dict) -> dict:
    return make_payload([six_kind_location])


@pytest.fixture
def config() -> ProxyConfig:
    return ProxyConfig(
        cwa_api_key=TEST_API_KEY,
        upstream=UpstreamConfig(base_url=TEST_BASE_URL),
    )


@pytest.fixture
def config_without_key() -> ProxyConfig:
    return ProxyConfig(upstream=UpstreamConfig(base_url=TEST_BASE_URL))


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def cwa_forecast(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "cwa_forecast_36h.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture(name="make_element")
def make_element_fixture():
    return make_element


@pytest.fixture(name="make_payload")
def make_payload_fixture():
    return make_payload
