import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator


@contextmanager
def log_duration(logger, label: str, *, level: str = "debug", **fields: Any) -> Iterator[Dict[str, Any]]:
    """Log how long a block took, in milliseconds.

    The yielded dict may be filled by the block; its items are appended to
    the log line as ``key=value`` pairs.

    Usage:
        with log_duration(logger, "fetch", url=url) as info:
            info["status"] = response.status_code
    """
    extra: Dict[str, Any] = dict(fields)
    t0 = time.monotonic()
    try:
        yield extra
    finally:
        elapsed = int((time.monotonic() - t0) * 1000)
        tail = " ".join(f"{k}={v}" for k, v in extra.items())
        log = getattr(logger, level, logger.debug)
        log("%s elapsed=%dms %s", label, elapsed, tail)
