"""Value types shared across the analyzer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class FunctionQuery:
    """Parameters identifying a Lambda function and a time window to query."""

    function_name: str
    start_time: datetime
    end_time: datetime
    qualifier: str = ""
    region: str = ""


@dataclass(frozen=True)
class AWSClients:
    """The service clients the analyzer talks to."""

    lambda_client: Any
    cloudwatch_client: Any
    xray_client: Any
    logs_client: Any


@dataclass(frozen=True)
class ThrottleRateReturn:
    """Throttle rate of a function over a time window."""

    throttle_rate: float
    function_name: str
    qualifier: str
    start_time: datetime
    end_time: datetime


@dataclass(frozen=True)
class TimeoutRateReturn:
    """Timeout rate of a function over a time window."""

    timeout_rate: float
    function_name: str
    qualifier: str
    start_time: datetime
    end_time: datetime


@dataclass(frozen=True)
class ConfigOptions:
    """Options used to configure the service clients."""

    region: str = ""
    profile: str = ""
    access_key_id: str = ""
    secret_access_key: str = ""