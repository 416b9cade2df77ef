from __future__ import annotations

import io
import threading
from pathlib import Path
from typing import Callable, Optional

import requests
from PIL import Image, UnidentifiedImageError

from gmaps_static.config import settings
from gmaps_static.logger import loader_logger as logger
from gmaps_static.utils.time import log_duration


class ImageHandle:
    """Image-loading object: assigning ``src`` fetches and decodes in the background.

    Exactly one of ``onload``/``onerror`` fires per assigned ``src``. The fetch
    thread is not a daemon, so a pending load keeps the interpreter alive. Neither
    handler receives arguments; the failure reason only goes to the log.
    """

    def __init__(self, *, session: Optional[requests.Session] = None) -> None:
        self.onload: Optional[Callable[[], None]] = None
        self.onerror: Optional[Callable[[], None]] = None
        self.image: Optional[Image.Image] = None
        self.content: bytes = b""
        self.content_type: str = ""
        self.status_code: Optional[int] = None
        self.complete = False
        self._src = ""
        self._session = session
        self._settled = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def src(self) -> str:
        return self._src

    @src.setter
    def src(self, url: str) -> None:
        self._src = url or ""
        if not self._src:
            return
        self.complete = False
        self._settled.clear()
        self._thread = threading.Thread(target=self._load, args=(self._src,), name="ImageHandle")
        self._thread.start()

    @property
    def width(self) -> int:
        return self.image.width if self.image is not None else 0

    @property
    def height(self) -> int:
        return self.image.height if self.image is not None else 0

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the current load settled; False on timeout."""
        return self._settled.wait(timeout)

    def save(self, path: Path) -> Path:
        if self.image is None:
            raise RuntimeError("image not loaded")
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.content)
        return path

    def _fetch(self, url: str) -> None:
        own_session = False
        session = self._session
        if session is None:
            session = requests.Session()
            own_session = True
        try:
            with log_duration(logger, "[handle] fetch", url=url) as info:
                response = session.get(url, timeout=settings.REQUEST_TIMEOUT)
                info["status"] = response.status_code
            self.status_code = response.status_code
            response.raise_for_status()
            content = response.content
        finally:
            if own_session:
                session.close()

        image = Image.open(io.BytesIO(content))
        image.load()
        self.content = content
        self.content_type = response.headers.get("Content-Type", "")
        self.image = image

    def _load(self, url: str) -> None:
        try:
            self._fetch(url)
        except (requests.RequestException, UnidentifiedImageError, OSError) as e:
            logger.debug("[handle] load failed url=%s reason=%s", url, e)
            self._fire(self.onerror)
        except Exception:
            logger.exception("[handle] unexpected error while loading %s", url)
            self._fire(self.onerror)
        else:
            logger.debug("[handle] loaded url=%s size=%dx%d", url, self.width, self.height)
            self._fire(self.onload)

    def _fire(self, handler: Optional[Callable[[], None]]) -> None:
        self.complete = True
        try:
            if handler is not None:
                handler()
        except Exception:
            logger.exception("[handle] event handler failed for %s", self._src)
        finally:
            self._settled.set()
