"""
QueryResult model representing the result of an OpenTSDB time-series query.
"""

from dataclasses import dataclass, field

from .time_series_result import TimeSeriesResult

STATUS_SUCCESS = "success"
STATUS_NO_DATA = "no_data"


@dataclass(frozen=True)
class QueryResult:
    """
    Result of an OpenTSDB query containing the extracted series.

    A response with an empty result list is represented by status "no_data"
    and no series, never by a series with empty fields.

    Attributes:
        status: "success" if series were extracted, "no_data" otherwise.
        series: Tuple of TimeSeriesResult objects in response order.
        skipped: Number of malformed series dropped in lenient mode.
    """

    status: str
    series: tuple[TimeSeriesResult, ...] = field(default_factory=tuple)
    skipped: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(self.series))

    @classmethod
    def no_data(cls) -> "QueryResult":
        """
        Create the result for a response that contained no series.

        Returns:
            QueryResult with status "no_data".
        """
        return cls(status=STATUS_NO_DATA, series=())

    @property
    def has_data(self) -> bool:
        """True if at least one series was extracted."""
        return self.status == STATUS_SUCCESS and bool(self.series)

    @property
    def total_samples(self) -> int:
        """
        Get total number of samples across all series.

        Returns:
            Total sample count.
        """
        return sum(s.sample_count for s in self.series)

    def to_dict(self) -> dict:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary with status, series, and skipped count.
        """
        return {
            "status": self.status,
            "series": [s.to_dict() for s in self.series],
            "skipped": self.skipped
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QueryResult":
        """
        Create QueryResult from dictionary.

        Args:
            data: Dictionary with status and series keys.

        Returns:
            QueryResult instance.
        """
        series = [TimeSeriesResult.from_dict(s) for s in data.get("series", [])]
        return cls(
            status=data["status"],
            series=series,
            skipped=data.get("skipped", 0)
        )
