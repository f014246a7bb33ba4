# lambdaanalyzer

Compute reliability figures for a serverless function over a time window:

- **throttle rate**: the sum of the `Throttles` metric divided by the sum of the
  `Invocations` metric (both fetched with the `Sum` statistic from the
  `AWS/Lambda` namespace).
- **timeout rate**: the `timeoutCount` returned by a Logs Insights query over the
  function's log group `/aws/lambda/<function>` (messages matching
  `Status: timeout`), divided by the sum of the `Invocations` metric.

The package has no runtime dependencies of its own. You supply the service
clients. `lambdaanalyzer` only calls `get_metric_data` on the CloudWatch client
and `start_query` / `get_query_results` on the logs client, with keyword
arguments named as in the CloudWatch and CloudWatch Logs APIs
(`MetricDataQueries`, `queryString`, `queryId` and so on), and reads the
responses as dictionaries.

## Installation

```
pip install lambdaanalyzer
```

## Usage

### From configuration options

`Analyzer.from_options(opts, client_factory)` builds the clients through a
factory. The factory is called once for each of the services `"lambda"`,
`"cloudwatch"`, `"xray"` and `"logs"`, as `client_factory(service_name, **options)`,
where `options` comes from `lambdaanalyzer.clients.to_load_options`:

| `ConfigOptions` field              | keyword passed to the factory                  |
|------------------------------------|------------------------------------------------|
| `profile`                          | `profile_name`                                 |
| `region`                           | `region_name`                                  |
| `access_key_id`, `secret_access_key` | `aws_access_key_id`, `aws_secret_access_key` |

Empty fields are left out.

```python
from datetime import datetime, timedelta, timezone

from lambdaanalyzer.analyzer import Analyzer
from lambdaanalyzer.types import ConfigOptions


def client_factory(service_name, **options):
    # Return a client object for the named service, configured from
    # options such as region_name="us-west-2" or profile_name="default".
    ...


analyzer = Analyzer.from_options(
    ConfigOptions(region="us-west-2", profile="default"),
    client_factory,
)

end = datetime.now(timezone.utc)
start = end - timedelta(hours=1)

result = analyzer.get_throttle_rate("my-function", "prod", start, end, 60)
print(f"Throttle rate for {result.function_name}:{result.qualifier} "
      f"is {result.throttle_rate * 100:.2f}%")

timeouts = analyzer.get_timeout_rate("my-function", "prod", start, end, 60)
print(f"Timeout rate: {timeouts.timeout_rate * 100:.2f}%")
```

### From ready-made clients

```python
from lambdaanalyzer.analyzer import Analyzer
from lambdaanalyzer.types import AWSClients

analyzer = Analyzer(AWSClients(
    lambda_client=lambda_client,
    cloudwatch_client=cloudwatch_client,
    xray_client=xray_client,
    logs_client=logs_client,
))
```

An empty qualifier queries the function as a whole. With a qualifier (a version
or an alias), the metric query adds a `Resource` dimension of
`function:qualifier`.

Results are frozen dataclasses, `ThrottleRateReturn` and `TimeoutRateReturn`,
carrying the rate, the function name, the qualifier and the time window.

### Lower-level pieces

- `lambdaanalyzer.cloudwatch.CloudWatchFetcher.fetch_metric(query, metric_name, stat, period)`
  returns the `MetricDataResults` list for one metric.
- `lambdaanalyzer.logsinsights.LogsInsightsFetcher.run_query(query, query_string)`
  starts a query and polls every `poll_interval` seconds (2.0 by default) until it
  completes, returning each result row as a `dict` of field to value.
- `lambdaanalyzer.metrics` holds `get_throttle_rate`, `get_timeout_rate`,
  `sum_metric_values` and the query text `LAMBDA_TIMEOUT_QUERY`.

## Errors

- `lambdaanalyzer.clients.ConfigurationError` (a `ValueError`): an access key ID
  was given without a secret access key, or the reverse.
- `lambdaanalyzer.logsinsights.QueryError`: a Logs Insights query returned no ID,
  or it failed or was cancelled.
- `lambdaanalyzer.metrics.MetricsError`: fetching metrics or running the logs
  query failed, the `timeoutCount` was not an integer, or there were no
  invocations in the window, so no rate can be computed.

## What it does not do

This is a library only: there is no command-line tool. It does not create
service clients by itself, and although it asks the factory for `lambda` and
`xray` clients, it makes no calls on them. Polling a Logs Insights query has no
time limit; it waits until the query completes, fails or is cancelled.

## Running the tests

```
pip install -e ".[test]"
pytest
```