import requests

from gmaps_static.handle import ImageHandle

from conftest import FakeResponse, FakeSession, make_png

WAIT = 5


def _load(handle, url="https://example.test/map.png"):
    events = []
    handle.onload = lambda: events.append("load")
    handle.onerror = lambda: events.append("error")
    handle.src = url
    assert handle.wait(WAIT)
    return events


def test_loaded_handle_exposes_image_details():
    session = FakeSession(FakeResponse(content=make_png(64, 48)))
    handle = ImageHandle(session=session)
    assert _load(handle) == ["load"]
    assert handle.complete
    assert (handle.width, handle.height) == (64, 48)
    assert handle.content_type == "image/png"
    assert handle.status_code == 200
    assert handle.image.format == "PNG"


def test_error_status_fires_onerror():
    handle = ImageHandle(session=FakeSession(FakeResponse(status_code=500)))
    assert _load(handle) == ["error"]
    assert handle.status_code == 500
    assert handle.image is None
    assert handle.width == 0


def test_empty_src_does_not_fetch():
    session = FakeSession()
    handle = ImageHandle(session=session)
    handle.src = ""
    assert not handle.wait(0.05)
    assert session.calls == []


def test_owned_session_is_closed(monkeypatch):
    session = FakeSession()
    monkeypatch.setattr(requests, "Session", lambda: session)
    handle = ImageHandle()
    assert _load(handle) == ["load"]
    assert session.closed


def test_given_session_is_not_closed():
    session = FakeSession()
    assert _load(ImageHandle(session=session)) == ["load"]
    assert not session.closed


def test_save_writes_raw_bytes(tmp_path):
    payload = make_png()
    handle = ImageHandle(session=FakeSession(FakeResponse(content=payload)))
    _load(handle)
    out = handle.save(tmp_path / "maps" / "map.png")
    assert out.read_bytes() == payload


def test_handler_exception_still_settles():
    handle = ImageHandle(session=FakeSession())

    def broken():
        raise ValueError("handler bug")

    handle.onload = broken
    handle.src = "https://example.test/map.png"
    assert handle.wait(WAIT)
    assert handle.complete
