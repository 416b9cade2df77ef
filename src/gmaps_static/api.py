from __future__ import annotations

from typing import Any, Mapping, Optional

import requests

from gmaps_static.completion import CompletionSignal
from gmaps_static.handle import ImageHandle
from gmaps_static.loader import Callback, load_static_map
from gmaps_static.logger import main_logger as logger
from gmaps_static.options import build_url as _build_url


def static_map(
    options: Mapping[str, Any],
    callback: Optional[Callback] = None,
    *,
    session: Optional[requests.Session] = None,
    strict: bool = False,
) -> CompletionSignal:
    """Programmatic entry point: load a Static Maps image asynchronously.

    Example:
        from gmaps_static import static_map
        static_map({"center": "43.653226,-79.3831843"}).then(lambda img: img.save("map.png"))
    """
    return load_static_map(options, callback, session=session, strict=strict)


def fetch_static_map(
    options: Mapping[str, Any],
    *,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
    strict: bool = False,
) -> ImageHandle:
    """Blocking variant of ``static_map``; returns the loaded handle or raises.

    ``timeout`` bounds the wait for the result; concurrent.futures.TimeoutError
    is raised when it elapses (the load itself keeps running).
    """
    signal = load_static_map(options, session=session, strict=strict)
    handle = signal.result(timeout=timeout)
    logger.info("static map loaded: %dx%d %s", handle.width, handle.height, handle.content_type or "?")
    return handle


def build_url(options: Mapping[str, Any]) -> str:
    """Return the Static Maps URL for ``options`` without loading it."""
    return _build_url(options)
