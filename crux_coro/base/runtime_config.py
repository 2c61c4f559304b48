"""Process-wide runtime settings for the coroutine engine.

This module centralizes the environment-driven knobs that affect how
coroutine bodies are started and supervised, and exposes them through a
process-cached accessor so that environment parsing happens once.

Key Components
--------------
RuntimeConfig
    Frozen dataclass capturing normalized settings.

get_runtime_config()
    Returns the cached configuration, parsing environment overrides on first
    use and again whenever one of the variables changes. Supported
    environment variables (all optional):
        CORO_THREAD_NAME_PREFIX   name prefix for spawned body threads
        CORO_DAEMON_THREADS       whether body threads are daemonic (1/0)
        CORO_LEAK_DETECTION       whether the leak sentinel is armed (1/0)

Design Constraints
------------------
1. No per-call env parsing (cache after first read).
2. Side-effect free access (apart from first load) for deterministic tests.
"""
from __future__ import annotations

from dataclasses import dataclass
import os


_ENV_VARS = ("CORO_THREAD_NAME_PREFIX", "CORO_DAEMON_THREADS", "CORO_LEAK_DETECTION")
_TRUTHY = frozenset(("1", "true", "yes", "on"))
_FALSY = frozenset(("0", "false", "no", "off"))


@dataclass(frozen=True)
class RuntimeConfig:
    """Container for normalized runtime settings.

    Attributes:
        thread_name_prefix: Prefix used when naming body threads started by
            the default spawn function.
        daemon_threads: Whether body threads are daemonic, so a leaked or
            suspended coroutine never blocks interpreter exit.
        leak_detection: Default for arming the leak sentinel on new
            coroutines.
    """

    thread_name_prefix: str = "coro"
    daemon_threads: bool = True
    leak_detection: bool = True


_CACHED: RuntimeConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_bool(name: str, default: bool) -> bool:
    """Parse an environment variable as a boolean flag.

    Unknown spellings fall back to ``default``.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return default


def get_runtime_config() -> RuntimeConfig:
    """Return the process-cached :class:`RuntimeConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - intentional, documented module cache
    cur_guard = "/".join(os.getenv(name, "") for name in _ENV_VARS)
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED

    prefix = (os.getenv("CORO_THREAD_NAME_PREFIX") or "").strip() or RuntimeConfig.thread_name_prefix
    _CACHED = RuntimeConfig(
        thread_name_prefix=prefix,
        daemon_threads=_parse_env_bool("CORO_DAEMON_THREADS", RuntimeConfig.daemon_threads),
        leak_detection=_parse_env_bool("CORO_LEAK_DETECTION", RuntimeConfig.leak_detection),
    )
    _ENV_GUARD = cur_guard
    return _CACHED


__all__ = ["RuntimeConfig", "get_runtime_config"]
