"""Reshape the CWA F-C0032-001 payload into per-city forecast records."""

from cwaweather.models.forecast import (
    ELEMENT_FIELDS,
    CityForecast,
    ForecastRecord,
    Location,
    TimeSlot,
    UpstreamRecordSet,
    WeatherElement,
)


def parse_records(raw: dict) -> UpstreamRecordSet:
    """Parse the upstream JSON body.

    Raises KeyError/TypeError when the payload does not have the expected
    ``records`` shape. A missing ``location`` list parses as empty.
    """
    records = raw["records"]
    return UpstreamRecordSet(
        dataset_description=records.get("datasetDescription", ""),
        locations=[_parse_location(loc) for loc in records.get("location") or []],
    )


def reshape_location(location: Location) -> CityForecast:
    """Build one forecast record per time slot of the first weather element.

    Elements are assumed positionally aligned with element 0. A shorter
    element raises IndexError.
    """
    anchor = location.elements[0].slots
    forecasts: list[ForecastRecord] = []

    for i, window in enumerate(anchor):
        values: dict[str, str] = {}
        for element in location.elements:
            slot = element.slots[i]
            # StrEnum keys hash like their raw code, so unknown kinds miss.
            target = ELEMENT_FIELDS.get(element.kind)
            if target is None:
                continue
            attr, suffix = target
            values[attr] = slot.value + suffix
        forecasts.append(
            ForecastRecord(
                start_time=window.start_time,
                end_time=window.end_time,
                **values,
            )
        )

    return CityForecast(city=location.name, forecasts=forecasts)


def reshape_all(records: UpstreamRecordSet) -> list[CityForecast]:
    return [reshape_location(loc) for loc in records.locations]


def _parse_location(raw: dict) -> Location:
    return Location(
        name=raw["locationName"],
        elements=[_parse_element(el) for el in raw["weatherElement"]],
    )


def _parse_element(raw: dict) -> WeatherElement:
    return WeatherElement(
        kind=raw["elementName"],
        slots=[
            TimeSlot(
                start_time=t.get("startTime", ""),
                end_time=t.get("endTime", ""),
                value=str(t["parameter"].get("parameterName", "")),
            )
            for t in raw["time"]
        ],
    )
