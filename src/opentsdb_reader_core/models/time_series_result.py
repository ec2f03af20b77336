"""
TimeSeriesResult model representing one series from an OpenTSDB query.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from ..exceptions import OpenTSDBShapeError
from ..utils import MILLISECONDS_PER_SECOND, ms_to_seconds, parse_number, seconds_to_ms

METRIC_NAME_KEY = "metric"


def _parse_value(raw: Any) -> float:
    # "NaN" is accepted, OpenTSDB uses it for gaps.
    return parse_number(raw, "sample value")


def _check_datapoints(dps: Any) -> None:
    if not isinstance(dps, list) or not dps:
        raise OpenTSDBShapeError("Series has no 'dps' datapoints")
    for index, dp in enumerate(dps):
        if not isinstance(dp, (list, tuple)) or len(dp) < 2:
            raise OpenTSDBShapeError(
                f"Datapoint {index} is not a [timestamp, value] pair: {dp!r}"
            )


@dataclass(frozen=True)
class TimeSeriesResult:
    """
    A single named, tagged series of samples on a regular time grid.

    Attributes:
        metric_name: Name of the metric (e.g., "sys.cpu.user").
        start_time_millis: Unix timestamp in milliseconds of the first sample.
        step_secs: Sampling interval in seconds, 0 if fewer than two samples.
        end_time_millis: End-of-window marker, one step past the last sample.
        tags: Read-only mapping of tag key-value pairs (e.g., {"host": "web01"}).
        values: Tuple of sample values in timestamp order.
    """

    metric_name: str
    start_time_millis: int
    step_secs: int
    end_time_millis: int
    tags: Mapping[str, str]
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))
        object.__setattr__(self, "values", tuple(self.values))

    @property
    def sample_count(self) -> int:
        """Number of samples in the series."""
        return len(self.values)

    @property
    def timestamps_millis(self) -> list[int]:
        """
        Get the nominal timestamp of every sample on the inferred grid.

        Returns:
            List of Unix timestamps in milliseconds, one per value.
        """
        step_ms = self.step_secs * MILLISECONDS_PER_SECOND
        return [self.start_time_millis + i * step_ms for i in range(len(self.values))]

    def to_dict(self) -> dict:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary with metric name, time grid, tags, and values.
        """
        return {
            "metric_name": self.metric_name,
            "start_time_millis": self.start_time_millis,
            "step_secs": self.step_secs,
            "end_time_millis": self.end_time_millis,
            "tags": dict(self.tags),
            "values": list(self.values)
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TimeSeriesResult":
        """
        Create TimeSeriesResult from dictionary.

        Args:
            data: Dictionary produced by to_dict().

        Returns:
            TimeSeriesResult instance.
        """
        return cls(
            metric_name=data["metric_name"],
            start_time_millis=int(data["start_time_millis"]),
            step_secs=int(data["step_secs"]),
            end_time_millis=int(data["end_time_millis"]),
            tags=dict(data.get("tags", {})),
            values=[float(v) for v in data.get("values", [])]
        )

    @classmethod
    def from_opentsdb_entry(cls, entry: Any) -> "TimeSeriesResult":
        """
        Create TimeSeriesResult from one element of an OpenTSDB result list.

        Format: {"metric": {"metric": name, tag: value, ...}, "dps": [[ts, "val"], ...]}

        The metric name shares its mapping with the tags under the reserved
        "metric" key. Timestamps are Unix seconds (number or numeric string),
        values are numeric strings. The step is the whole-second gap between
        the first two samples, and the end marker is
        start + sample_count * step, i.e. one step past the last sample.

        Args:
            entry: Dictionary with 'metric' (name and tags) and 'dps' (datapoints).

        Returns:
            TimeSeriesResult instance.

        Raises:
            OpenTSDBShapeError: If the entry does not have the expected structure.
            OpenTSDBValueError: If a timestamp or value is not numeric.
        """
        if not isinstance(entry, dict):
            raise OpenTSDBShapeError(
                f"Expected a series object, got {type(entry).__name__}"
            )

        metric = entry.get("metric")
        if not isinstance(metric, dict):
            raise OpenTSDBShapeError("Series is missing its 'metric' mapping")
        metric_name = metric.get(METRIC_NAME_KEY)
        if not isinstance(metric_name, str):
            raise OpenTSDBShapeError("Series 'metric' mapping has no metric name")
        tags = {k: v for k, v in metric.items() if k != METRIC_NAME_KEY}

        dps = entry.get("dps")
        _check_datapoints(dps)
        values = [_parse_value(dp[1]) for dp in dps]

        start_time_millis = seconds_to_ms(dps[0][0])
        if len(dps) > 1:
            step_secs = ms_to_seconds(seconds_to_ms(dps[1][0]) - start_time_millis)
        else:
            step_secs = 0
        end_time_millis = (start_time_millis
                           + len(dps) * step_secs * MILLISECONDS_PER_SECOND)

        return cls(
            metric_name=metric_name,
            start_time_millis=start_time_millis,
            step_secs=step_secs,
            end_time_millis=end_time_millis,
            tags=tags,
            values=values
        )
