"""CWA 36-hour forecast models: upstream records and reshaped city forecasts."""

from dataclasses import dataclass, field
from enum import StrEnum


class ElementKind(StrEnum):
    WEATHER = "Wx"
    RAIN_PROBABILITY = "PoP"
    MIN_TEMP = "MinT"
    MAX_TEMP = "MaxT"
    COMFORT = "CI"
    WIND_SPEED = "WS"


CELSIUS = "°C"

# Element kind -> (ForecastRecord attribute, suffix appended to the value)
ELEMENT_FIELDS: dict[ElementKind, tuple[str, str]] = {
    ElementKind.WEATHER: ("weather", ""),
    ElementKind.RAIN_PROBABILITY: ("rain", "%"),
    ElementKind.MIN_TEMP: ("min_temp", CELSIUS),
    ElementKind.MAX_TEMP: ("max_temp", CELSIUS),
    ElementKind.COMFORT: ("comfort", ""),
    ElementKind.WIND_SPEED: ("wind_speed", ""),
}


@dataclass(frozen=True)
class TimeSlot:
    start_time: str
    end_time: str
    value: str  # parameter.parameterName


@dataclass(frozen=True)
class WeatherElement:
    kind: str  # raw elementName, may be outside ElementKind
    slots: list[TimeSlot]


@dataclass(frozen=True)
class Location:
    name: str
    elements: list[WeatherElement]


@dataclass(frozen=True)
class UpstreamRecordSet:
    dataset_description: str
    locations: list[Location]


@dataclass(frozen=True)
class ForecastRecord:
    start_time: str
    end_time: str
    weather: str = ""
    rain: str = ""
    min_temp: str = ""
    max_temp: str = ""
    comfort: str = ""
    wind_speed: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "weather": self.weather,
            "rain": self.rain,
            "minTemp": self.min_temp,
            "maxTemp": self.max_temp,
            "comfort": self.comfort,
            "windSpeed": self.wind_speed,
        }


@dataclass(frozen=True)
class CityForecast:
    city: str
    forecasts: list[ForecastRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "city": self.city,
            "forecasts": [f.to_dict() for f in self.forecasts],
        }
