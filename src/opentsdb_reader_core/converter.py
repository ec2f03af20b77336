"""
Conversion of OpenTSDB response bodies into opentsdb-reader-core models.
"""

import enum
import json
import logging
from typing import Any

import requests

from .exceptions import (
    OpenTSDBConnectionError,
    OpenTSDBParseError,
    OpenTSDBQueryError,
    OpenTSDBShapeError,
)
from .models import MetricDescriptorsResponse, QueryResult, TimeSeriesResult
from .models.query_result import STATUS_SUCCESS

logger = logging.getLogger(__name__)


class ResponseShape(enum.Enum):
    """Declared shape of a response body, selecting how it is decoded."""

    TIME_SERIES = "time_series"
    METRIC_DESCRIPTORS = "metric_descriptors"


def _result_list(decoded: Any) -> list:
    """Locate decoded["data"]["result"], raising if the path is not there."""
    if not isinstance(decoded, dict):
        raise OpenTSDBShapeError(
            f"Expected a JSON object at the top level, got {type(decoded).__name__}"
        )
    data = decoded.get("data")
    if not isinstance(data, dict):
        raise OpenTSDBShapeError("Response has no 'data' object")
    result_list = data.get("result")
    if not isinstance(result_list, list):
        raise OpenTSDBShapeError("Response 'data' has no 'result' list")
    return result_list


def extract_series(decoded: Any, strict: bool = True) -> QueryResult:
    """
    Extract time series from a decoded OpenTSDB query response.

    Format: {"data": {"result": [{"metric": {...}, "dps": [[ts, "val"], ...]}, ...]}}

    Args:
        decoded: Decoded JSON response.
        strict: If True, any malformed series aborts the whole conversion.
            If False, malformed series are logged, skipped and counted.

    Returns:
        QueryResult with one TimeSeriesResult per series, in response order,
        or QueryResult.no_data() if the response result list is empty.

    Raises:
        OpenTSDBShapeError: If the response structure is not as expected.
        OpenTSDBValueError: If a sample value or timestamp is not numeric.
        OpenTSDBParseError: If no series at all could be parsed in lenient mode.
    """
    result_list = _result_list(decoded)

    if not result_list:
        logger.warning("Received no data from OpenTSDB.")
        return QueryResult.no_data()

    series: list[TimeSeriesResult] = []
    skipped = 0
    for index, entry in enumerate(result_list):
        try:
            series.append(TimeSeriesResult.from_opentsdb_entry(entry))
        except OpenTSDBParseError as e:
            if strict:
                raise type(e)(f"Series {index}: {e}") from e
            logger.warning("Skipping unparseable series %d: %s", index, e)
            skipped += 1

    if not series:
        raise OpenTSDBParseError(
            f"None of the {skipped} series in the OpenTSDB response could be parsed"
        )

    logger.debug("Extracted %d series from OpenTSDB response", len(series))
    return QueryResult(status=STATUS_SUCCESS, series=series, skipped=skipped)


class OpenTSDBResponseConverter:
    """
    Converts OpenTSDB response bodies into models.

    The transport is responsible for issuing the request; the converter
    only decodes what it hands over.

    Example:
        converter = OpenTSDBResponseConverter()

        result = converter.from_response(response, ResponseShape.TIME_SERIES)
        if result.has_data:
            for series in result.series:
                print(series.metric_name, series.step_secs)
    """

    def __init__(
        self,
        strict: bool = True,
        first_line_only: bool = False
    ):
        """
        Initialize the converter.

        Args:
            strict: If True, a malformed series fails the whole response.
                If False, malformed series are skipped with a warning and
                counted in QueryResult.skipped; a response in which no series
                parses still raises OpenTSDBParseError.
            first_line_only: If True, only the first line of a time-series
                body is decoded. Only safe when the server is known to emit
                single-line JSON.
        """
        self.strict = strict
        self.first_line_only = first_line_only

    def _decode(self, body: str | bytes, shape: ResponseShape) -> Any:
        if isinstance(body, bytes):
            try:
                body = body.decode("utf-8")
            except UnicodeDecodeError as e:
                raise OpenTSDBParseError(f"Response from OpenTSDB is not valid UTF-8: {e}") from e

        if self.first_line_only and shape is ResponseShape.TIME_SERIES:
            body = body.partition("\n")[0].rstrip("\r")

        try:
            return json.loads(body)
        except ValueError as e:
            raise OpenTSDBParseError(f"Invalid JSON response from OpenTSDB: {e}") from e

    def from_decoded(
        self,
        decoded: Any,
        shape: ResponseShape
    ) -> QueryResult | MetricDescriptorsResponse:
        """
        Convert an already-decoded response according to its declared shape.

        Args:
            decoded: Decoded JSON value.
            shape: Declared shape of the response.

        Returns:
            QueryResult for TIME_SERIES, MetricDescriptorsResponse for
            METRIC_DESCRIPTORS.

        Raises:
            OpenTSDBParseError: If the value does not match the declared shape.
            ValueError: If shape is not a ResponseShape.
        """
        if shape is ResponseShape.METRIC_DESCRIPTORS:
            return MetricDescriptorsResponse.from_opentsdb_response(decoded)
        if shape is ResponseShape.TIME_SERIES:
            return extract_series(decoded, strict=self.strict)
        raise ValueError(f"Unsupported response shape: {shape!r}")

    def from_body(
        self,
        body: str | bytes,
        shape: ResponseShape
    ) -> QueryResult | MetricDescriptorsResponse:
        """
        Decode a JSON response body and convert it according to its shape.

        Args:
            body: Response body as text or UTF-8 bytes.
            shape: Declared shape of the response.

        Returns:
            QueryResult or MetricDescriptorsResponse, see from_decoded().

        Raises:
            OpenTSDBParseError: If the body is not valid JSON of the declared shape.
        """
        return self.from_decoded(self._decode(body, shape), shape)

    def from_response(
        self,
        response: requests.Response,
        shape: ResponseShape
    ) -> QueryResult | MetricDescriptorsResponse:
        """
        Convert an HTTP response received from OpenTSDB.

        Args:
            response: Response returned by the transport.
            shape: Declared shape of the response.

        Returns:
            QueryResult or MetricDescriptorsResponse, see from_decoded().

        Raises:
            OpenTSDBQueryError: If the response status is not 2xx.
            OpenTSDBConnectionError: If reading the response body fails.
            OpenTSDBParseError: If the body is not valid JSON of the declared shape.
        """
        try:
            body = response.content
        except requests.exceptions.RequestException as e:
            raise OpenTSDBConnectionError(f"Failed to read response from OpenTSDB: {e}") from e

        if not 200 <= response.status_code < 300:
            text = body.decode("utf-8", errors="replace") if body else ""
            raise OpenTSDBQueryError(
                f"OpenTSDB query failed with status {response.status_code}: {text}"
            )

        return self.from_body(body, shape)
