"""Implementation parts behind ``crux_coro.base.cancellation``."""
