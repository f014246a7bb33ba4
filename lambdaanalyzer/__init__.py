"""Throttle and timeout rate analysis for serverless functions from metrics and logs."""

__version__ = "0.1.0"