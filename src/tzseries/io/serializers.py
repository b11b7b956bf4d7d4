import json
from typing import Any, Iterable

from tzseries.domain.series import DistributionPoint, TimeSeriesPoint


def point_to_dict(point: TimeSeriesPoint) -> dict[str, Any]:
    return {"timestamp": point.timestamp, "value": point.value}


def series_to_dicts(points: Iterable[TimeSeriesPoint]) -> list[dict[str, Any]]:
    return [point_to_dict(point) for point in points]


def distribution_to_dicts(points: Iterable[DistributionPoint]) -> list[dict[str, Any]]:
    return [
        {"key": point.key, "value": point.value, "metadata": dict(point.metadata)}
        for point in points
    ]


class JsonLineSerializer:
    def __call__(self, point: TimeSeriesPoint) -> str:
        return json.dumps(point_to_dict(point), ensure_ascii=False, default=str) + "\n"


def series_to_json_lines(points: Iterable[TimeSeriesPoint]) -> str:
    serializer = JsonLineSerializer()
    return "".join(serializer(point) for point in points)
