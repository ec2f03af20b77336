"""
Data models for opentsdb-reader-core.
"""

from .metric_descriptors_response import MetricDescriptorsResponse
from .query_result import QueryResult
from .time_series_result import TimeSeriesResult

__all__ = [
    "MetricDescriptorsResponse",
    "QueryResult",
    "TimeSeriesResult",
]
