"""Default values for the CWA open-data API and the local listener."""

CWA_API_BASE_URL = "https://opendata.cwa.gov.tw/api"
FORECAST_36H_DATASET_ID = "F-C0032-001"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_ENVIRONMENT = "development"

# Environment variable -> dotted config key
ENV_OVERRIDES: dict[str, str] = {
    "CWA_API_KEY": "cwa_api_key",
    "HOST": "host",
    "PORT": "port",
    "NODE_ENV": "environment",
    "APP_ENV": "environment",
    "CWA_API_BASE_URL": "upstream.base_url",
}
