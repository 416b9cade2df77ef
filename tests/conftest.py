import io
import threading
from typing import List, Optional

import pytest
import requests
from PIL import Image


def make_png(width: int = 32, height: int = 24) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), "white").save(buf, "PNG")
    return buf.getvalue()


class FakeResponse:
    def __init__(self, status_code: int = 200, content: bytes = b"", content_type: str = "image/png") -> None:
        self.status_code = status_code
        self.content = content
        self.headers = {"Content-Type": content_type}

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None) -> None:
        self.response = response or FakeResponse(content=make_png())
        self.error = error
        self.calls: List[str] = []
        self.timeouts: List[object] = []
        self.closed = False

    def get(self, url, timeout=None):
        self.calls.append(url)
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True


class CallbackRecorder:
    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.called = threading.Event()

    def __call__(self, error, result=None) -> None:
        self.calls.append((error, result))
        self.called.set()


@pytest.fixture
def png_session():
    return FakeSession()


@pytest.fixture
def recorder():
    return CallbackRecorder()
