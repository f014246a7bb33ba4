"""Building service clients from configuration options."""

from __future__ import annotations

from typing import Any, Callable

from .types import AWSClients, ConfigOptions

ClientFactory = Callable[..., Any]

SERVICES = ("lambda", "cloudwatch", "xray", "logs")


class ConfigurationError(ValueError):
    """Raised when configuration options are inconsistent."""


def to_load_options(opts: ConfigOptions) -> dict[str, str]:
    """Translate configuration options into client keyword arguments."""
    options: dict[str, str] = {}
    if opts.profile:
        options["profile_name"] = opts.profile
    if opts.region:
        options["region_name"] = opts.region

    if opts.access_key_id and opts.secret_access_key:
        options["aws_access_key_id"] = opts.access_key_id
        options["aws_secret_access_key"] = opts.secret_access_key
    elif opts.access_key_id or opts.secret_access_key:
        raise ConfigurationError(
            "both AccessKeyID and SecretAccessKey must be set together"
        )
    return options


def new_aws_clients(opts: ConfigOptions, client_factory: ClientFactory) -> AWSClients:
    """Create every client the analyzer needs.

    ``client_factory`` is called as ``client_factory(service_name, **options)``
    for each of the services ``lambda``, ``cloudwatch``, ``xray`` and ``logs``.
    """
    options = to_load_options(opts)
    lambda_client, cloudwatch_client, xray_client, logs_client = (
        client_factory(service, **options) for service in SERVICES
    )
    return AWSClients(
        lambda_client=lambda_client,
        cloudwatch_client=cloudwatch_client,
        xray_client=xray_client,
        logs_client=logs_client,
    )