"""Running CloudWatch Logs Insights queries against Lambda log groups."""

from __future__ import annotations

import math
import time

from .types import AWSClients, FunctionQuery

_FINISHED_WITH_FAILURE = frozenset({"Failed", "Cancelled"})


class QueryError(RuntimeError):
    """Raised when a Logs Insights query cannot be started or does not succeed."""


class LogsInsightsFetcher:
    """Starts Logs Insights queries and polls until they finish."""

    def __init__(self, clients: AWSClients, poll_interval: float = 2.0) -> None:
        self._client = clients.logs_client
        self.poll_interval = poll_interval

    def run_query(self, query: FunctionQuery, query_string: str) -> list[dict[str, str]]:
        """Run a query over the function's log group and return its rows."""
        start = self._client.start_query(
            logGroupNames=[f"/aws/lambda/{query.function_name}"],
            queryString=query_string,
            startTime=math.floor(query.start_time.timestamp()),
            endTime=math.floor(query.end_time.timestamp()),
        )
        query_id = start.get("queryId")
        if query_id is None:
            raise QueryError("no query ID returned")

        while True:
            time.sleep(self.poll_interval)
            response = self._client.get_query_results(queryId=query_id)
            status = response.get("status")
            if status == "Complete":
                return [
                    {cell["field"]: cell["value"] for cell in row}
                    for row in response.get("results", [])
                ]
            if status in _FINISHED_WITH_FAILURE:
                raise QueryError(f"query failed with status: {status}")