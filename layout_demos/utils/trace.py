"""Timestamped flow tracing for layout and chart diagnostics."""

import time

from layout_demos.utils.settings import get_setting

_last_emitted: dict[str, float] = {}


def log_flow(component: str, message: str, *, level: str = "DEBUG",
             throttle_key: str | None = None, every_s: float | None = None):
    """Timestamped, optionally throttled flow logging."""
    # Set `minimal_trace_logs` to False in settings to see every pass.
    try:
        minimal_trace = bool(get_setting("minimal_trace_logs", bool))
    except Exception:
        minimal_trace = True
    if minimal_trace and level != "WARNING":
        return

    now = time.time()
    if throttle_key and every_s is not None:
        last = _last_emitted.get(throttle_key, 0.0)
        if (now - last) < every_s:
            return
        _last_emitted[throttle_key] = now
    ts = time.strftime("%H:%M:%S", time.localtime(now)) + f".{int((now % 1) * 1000):03d}"
    print(f"[{ts}][TRACE][{component}][{level}] {message}")
