from __future__ import annotations

import threading
from typing import Any, Callable, Mapping, Optional

import requests

from gmaps_static.completion import CompletionSignal
from gmaps_static.errors import ImageLoadError
from gmaps_static.handle import ImageHandle
from gmaps_static.logger import loader_logger as logger
from gmaps_static.options import build_url, redact_url, require_options

Callback = Callable[[Optional[BaseException], Optional[ImageHandle]], Any]


def load_static_map(
    options: Optional[Mapping[str, Any]],
    callback: Optional[Callback] = None,
    *,
    session: Optional[requests.Session] = None,
    strict: bool = False,
) -> CompletionSignal:
    """Build the Static Maps URL for ``options`` and load it into an ImageHandle.

    Returns a CompletionSignal resolved with the loaded handle or rejected
    with the error. ``callback(error, handle)`` is called once as well, on
    every path. ``options`` is not modified. With ``strict`` the required
    fields are checked before any request is made.
    """
    signal = CompletionSignal()
    lock = threading.Lock()
    state = {"done": False}

    def complete(error: Optional[BaseException], handle: Optional[ImageHandle] = None) -> None:
        with lock:
            if state["done"]:
                return
            state["done"] = True
        if error is None:
            signal.set_result(handle)
        else:
            signal.set_exception(error)
        if callback is None:
            return
        try:
            callback(error, handle)
        except Exception:
            logger.exception("static map callback raised")

    try:
        if strict:
            require_options(options)
        url = build_url(options)
        handle = ImageHandle(session=session)

        def _on_load() -> None:
            complete(None, handle)

        def _on_error() -> None:
            logger.warning("Cannot load image: %s", redact_url(url))
            complete(ImageLoadError())

        handle.onload = _on_load
        handle.onerror = _on_error
        logger.debug("loading static map %s", redact_url(url))
        handle.src = url
    except Exception as e:
        logger.debug("static map request not started: %r", e)
        complete(e)

    return signal
