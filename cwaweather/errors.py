"""Failures the forecast handler maps onto HTTP responses."""


class ForecastError(Exception):
    """Base for handled forecast failures; carries the response body fields."""

    status_code = 500
    error = "伺服器錯誤"
    message = ""

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.error, "message": self.message}


class MissingCredentialError(ForecastError):
    status_code = 500
    error = "伺服器設定錯誤"
    message = "請在 .env 檔案中設定 CWA_API_KEY"


class NoForecastDataError(ForecastError):
    status_code = 404
    error = "查無資料"
    message = "無法取得縣市天氣資料"


class ForecastFetchError(ForecastError):
    """Any network, upstream status, payload or reshape fault."""

    status_code = 500
    error = "伺服器錯誤"
    message = "無法取得全部縣市天氣資料"
