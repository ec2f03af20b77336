"""
Python library for converting OpenTSDB query responses into time series models
"""

from .converter import OpenTSDBResponseConverter, ResponseShape, extract_series
from .exceptions import (
    OpenTSDBConnectionError,
    OpenTSDBError,
    OpenTSDBParseError,
    OpenTSDBQueryError,
    OpenTSDBShapeError,
    OpenTSDBValueError,
)
from .models import MetricDescriptorsResponse, QueryResult, TimeSeriesResult

__version__ = "0.1.0"

__all__ = [
    "OpenTSDBResponseConverter",
    "ResponseShape",
    "extract_series",
    "MetricDescriptorsResponse",
    "QueryResult",
    "TimeSeriesResult",
    "OpenTSDBError",
    "OpenTSDBConnectionError",
    "OpenTSDBQueryError",
    "OpenTSDBParseError",
    "OpenTSDBShapeError",
    "OpenTSDBValueError",
]
