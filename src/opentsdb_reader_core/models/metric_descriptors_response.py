"""
MetricDescriptorsResponse model representing a listing of available metrics.
"""

from dataclasses import dataclass, field
from typing import Any

from ..exceptions import OpenTSDBShapeError


@dataclass(frozen=True)
class MetricDescriptorsResponse:
    """
    Metric names known to OpenTSDB.

    Attributes:
        status: Response status (typically "success").
        metrics: List of metric names.
    """

    status: str = "success"
    metrics: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary with status and metrics.
        """
        return {
            "status": self.status,
            "metrics": list(self.metrics)
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MetricDescriptorsResponse":
        """
        Create MetricDescriptorsResponse from dictionary.

        Args:
            data: Dictionary with status and metrics keys.

        Returns:
            MetricDescriptorsResponse instance.
        """
        return cls(
            status=data.get("status", "success"),
            metrics=list(data.get("metrics", []))
        )

    @classmethod
    def from_opentsdb_response(cls, decoded: Any) -> "MetricDescriptorsResponse":
        """
        Create MetricDescriptorsResponse from a decoded OpenTSDB response.

        Accepts the bare list returned by /api/suggest?type=metrics, or an
        object of the form {"status": ..., "data": [names]}.

        Args:
            decoded: Decoded JSON value.

        Returns:
            MetricDescriptorsResponse instance.

        Raises:
            OpenTSDBShapeError: If the value is neither form.
        """
        if isinstance(decoded, list):
            return cls(metrics=list(decoded))
        if isinstance(decoded, dict) and isinstance(decoded.get("data"), list):
            return cls(
                status=decoded.get("status", "success"),
                metrics=list(decoded["data"])
            )
        raise OpenTSDBShapeError(
            "Expected a list of metric names or an object with a 'data' list"
        )
