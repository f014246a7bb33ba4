"""Rate calculations over Lambda metrics and logs."""

from __future__ import annotations

import re
from typing import Any, Iterable

from .cloudwatch import CloudWatchFetcher
from .logsinsights import LogsInsightsFetcher
from .types import FunctionQuery, ThrottleRateReturn, TimeoutRateReturn

LAMBDA_TIMEOUT_QUERY = """
filter @message like /Status: timeout/
| stats count() as timeoutCount
"""

_INTEGER = re.compile(r"[+-]?[0-9]+")


class MetricsError(RuntimeError):
    """Raised when a rate cannot be computed."""


def sum_metric_values(results: Iterable[dict[str, Any]]) -> float:
    """Sum every value of every metric data result."""
    return float(sum(value for result in results for value in result.get("Values", [])))


def _invocations_sum(fetcher: CloudWatchFetcher, query: FunctionQuery, period: int) -> float:
    try:
        results = fetcher.fetch_metric(query, "Invocations", "Sum", period)
    except Exception as err:
        raise MetricsError(f"fetch invocations metric: {err}") from err
    return sum_metric_values(results)


def get_throttle_rate(
    fetcher: CloudWatchFetcher, query: FunctionQuery, period: int
) -> ThrottleRateReturn:
    """Ratio of throttled invocations to all invocations in the query window."""
    try:
        throttles = fetcher.fetch_metric(query, "Throttles", "Sum", period)
    except Exception as err:
        raise MetricsError(f"fetch throttles metric: {err}") from err
    invocations_sum = _invocations_sum(fetcher, query, period)
    throttles_sum = sum_metric_values(throttles)

    if invocations_sum == 0:
        raise MetricsError("total invocations is zero, cannot calculate throttle rate")

    return ThrottleRateReturn(
        throttle_rate=throttles_sum / invocations_sum,
        function_name=query.function_name,
        qualifier=query.qualifier,
        start_time=query.start_time,
        end_time=query.end_time,
    )


def get_timeout_rate(
    cw_fetcher: CloudWatchFetcher,
    logs_fetcher: LogsInsightsFetcher,
    query: FunctionQuery,
    period: int,
) -> TimeoutRateReturn:
    """Ratio of timed-out invocations (from logs) to all invocations."""
    try:
        rows = logs_fetcher.run_query(query, LAMBDA_TIMEOUT_QUERY)
    except Exception as err:
        raise MetricsError(f"run logs insights query: {err}") from err

    timeout_count = 0
    if rows:
        raw = rows[0].get("timeoutCount", "")
        if raw:
            if not _INTEGER.fullmatch(raw):
                raise MetricsError(f"parse timeoutCount from logs: invalid syntax {raw!r}")
            timeout_count = int(raw)

    invocations_sum = _invocations_sum(cw_fetcher, query, period)
    if invocations_sum == 0:
        raise MetricsError("total invocations is zero, cannot calculate timeout rate")

    return TimeoutRateReturn(
        timeout_rate=timeout_count / invocations_sum,
        function_name=query.function_name,
        qualifier=query.qualifier,
        start_time=query.start_time,
        end_time=query.end_time,
    )