"""High-level entry point for analysing Lambda functions."""

from __future__ import annotations

from datetime import datetime

from . import metrics
from .clients import ClientFactory, new_aws_clients
from .cloudwatch import CloudWatchFetcher
from .logsinsights import LogsInsightsFetcher
from .types import (
    AWSClients,
    ConfigOptions,
    FunctionQuery,
    ThrottleRateReturn,
    TimeoutRateReturn,
)


class Analyzer:
    """Computes reliability rates for Lambda functions."""

    def __init__(self, clients: AWSClients) -> None:
        self._cloudwatch = CloudWatchFetcher(clients)
        self._logs = LogsInsightsFetcher(clients)

    @classmethod
    def from_options(cls, opts: ConfigOptions, client_factory: ClientFactory) -> "Analyzer":
        """Create an analyzer with clients built from configuration options."""
        return cls(new_aws_clients(opts, client_factory))

    def get_throttle_rate(
        self,
        function_name: str,
        qualifier: str,
        start_time: datetime,
        end_time: datetime,
        period: int,
    ) -> ThrottleRateReturn:
        """Throttle rate of a function version or alias over a time window."""
        query = FunctionQuery(function_name, start_time, end_time, qualifier=qualifier)
        return metrics.get_throttle_rate(self._cloudwatch, query, period)

    def get_timeout_rate(
        self,
        function_name: str,
        qualifier: str,
        start_time: datetime,
        end_time: datetime,
        period: int,
    ) -> TimeoutRateReturn:
        """Timeout rate of a function version or alias over a time window."""
        query = FunctionQuery(function_name, start_time, end_time, qualifier=qualifier)
        return metrics.get_timeout_rate(self._cloudwatch, self._logs, query, period)