"""Formatter and event context behind :mod:`crux_coro.base.logging`."""

from .json_formatter import JsonFormatter
from .logging_context import LogContext

__all__ = ["JsonFormatter", "LogContext"]
