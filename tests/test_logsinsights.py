from datetime import datetime, timezone

import pytest

from lambdaanalyzer.logsinsights import LogsInsightsFetcher, QueryError
from lambdaanalyzer.types import AWSClients, FunctionQuery

START = datetime(2024, 1, 1, tzinfo=timezone.utc)
END = datetime(2024, 1, 1, 1, tzinfo=timezone.utc)
QUERY = FunctionQuery("fn", START, END)


class FakeLogs:
    def __init__(self, statuses, results=None, query_id="q-1"):
        self.statuses = list(statuses)
        self.results = results or []
        self.query_id = query_id
        self.start_calls = []
        self.poll_calls = []

    def start_query(self, **kwargs):
        self.start_calls.append(kwargs)
        return {} if self.query_id is None else {"queryId": self.query_id}

    def get_query_results(self, **kwargs):
        self.poll_calls.append(kwargs)
        status = self.statuses.pop(0)
        return {"status": status, "results": self.results if status == "Complete" else []}


def make_fetcher(client):
    return LogsInsightsFetcher(AWSClients(None, None, None, client), poll_interval=0)


def test_start_query_request():
    client = FakeLogs(["Complete"])
    make_fetcher(client).run_query(QUERY, "stats count()")
    request = client.start_calls[0]
    assert request["logGroupNames"] == ["/aws/lambda/fn"]
    assert request["queryString"] == "stats count()"
    assert request["startTime"] == int(START.timestamp())
    assert request["endTime"] == int(END.timestamp())


def test_rows_become_dicts():
    rows = [
        [{"field": "timeoutCount", "value": "4"}],
        [{"field": "a", "value": "x"}, {"field": "b", "value": "y"}],
    ]
    client = FakeLogs(["Complete"], rows)
    assert make_fetcher(client).run_query(QUERY, "q") == [
        {"timeoutCount": "4"},
        {"a": "x", "b": "y"},
    ]


def test_polls_until_complete():
    client = FakeLogs(["Scheduled", "Running", "Complete"])
    assert make_fetcher(client).run_query(QUERY, "q") == []
    assert len(client.poll_calls) == 3
    assert all(call == {"queryId": "q-1"} for call in client.poll_calls)


@pytest.mark.parametrize("status", ["Failed", "Cancelled"])
def test_failed_status_raises(status):
    client = FakeLogs(["Running", status])
    with pytest.raises(QueryError, match=f"query failed with status: {status}"):
        make_fetcher(client).run_query(QUERY, "q")


def test_missing_query_id_raises():
    client = FakeLogs([], query_id=None)
    with pytest.raises(QueryError, match="no query ID returned"):
        make_fetcher(client).run_query(QUERY, "q")
    assert client.poll_calls == []