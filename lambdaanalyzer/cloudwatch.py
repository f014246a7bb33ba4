"""Fetching Lambda metrics from CloudWatch."""

from __future__ import annotations

from typing import Any

from .types import AWSClients, FunctionQuery


class CloudWatchFetcher:
    """Reads metric data for Lambda functions."""

    def __init__(self, clients: AWSClients) -> None:
        self._client = clients.cloudwatch_client

    def fetch_metric(
        self, query: FunctionQuery, metric_name: str, stat: str, period: int
    ) -> list[dict[str, Any]]:
        """Return the metric data results for one metric of the queried function."""
        dimensions = [{"Name": "FunctionName", "Value": query.function_name}]
        if query.qualifier:
            dimensions.append(
                {
                    "Name": "Resource",
                    "Value": f"{query.function_name}:{query.qualifier}",
                }
            )

        response = self._client.get_metric_data(
            StartTime=query.start_time,
            EndTime=query.end_time,
            MetricDataQueries=[
                {
                    "Id": "m1",
                    "MetricStat": {
                        "Metric": {
                            "Namespace": "AWS/Lambda",
                            "MetricName": metric_name,
                            "Dimensions": dimensions,
                        },
                        "Period": period,
                        "Stat": stat,
                    },
                    "ReturnData": True,
                }
            ],
        )
        return list(response.get("MetricDataResults", []))