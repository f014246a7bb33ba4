from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from lambdaanalyzer.types import (
    AWSClients,
    ConfigOptions,
    FunctionQuery,
    ThrottleRateReturn,
    TimeoutRateReturn,
)

START = datetime(2024, 1, 1, tzinfo=timezone.utc)
END = datetime(2024, 1, 2, tzinfo=timezone.utc)


def test_function_query_defaults_to_empty_qualifier_and_region():
    query = FunctionQuery("my-function", START, END)
    assert query.qualifier == ""
    assert query.region == ""
    assert query.start_time < query.end_time


def test_function_query_is_immutable():
    query = FunctionQuery("my-function", START, END, qualifier="prod")
    with pytest.raises(FrozenInstanceError):
        query.qualifier = "dev"  # type: ignore[misc]
    assert query.qualifier == "prod"
    assert query.function_name == "my-function"


def test_function_query_equality_by_value():
    assert FunctionQuery("f", START, END, "prod") == FunctionQuery("f", START, END, "prod")
    assert FunctionQuery("f", START, END, "prod") != FunctionQuery("f", START, END, "dev")


def test_config_options_defaults_are_empty():
    opts = ConfigOptions()
    assert (opts.region, opts.profile, opts.access_key_id, opts.secret_access_key) == (
        "",
        "",
        "",
        "",
    )


def test_return_types_hold_given_values():
    throttle = ThrottleRateReturn(0.25, "f", "prod", START, END)
    timeout = TimeoutRateReturn(0.5, "g", "", START, END)
    assert throttle.throttle_rate == 0.25
    assert throttle.function_name == "f"
    assert timeout.timeout_rate == 0.5
    assert timeout.qualifier == ""


def test_aws_clients_holds_clients():
    clients = AWSClients("l", "c", "x", "logs")
    assert clients.cloudwatch_client == "c"
    assert clients.logs_client == "logs"