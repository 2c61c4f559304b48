"""Shared building blocks for the coroutine engine.

Cancellation signals, the fault taxonomy, structured logging, runtime
configuration, spawn functions and construction options live here; the
engine and the value-passing layers import from these modules only.
"""
