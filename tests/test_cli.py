import pytest
import requests

from gmaps_static.cli import fetch_map

from conftest import FakeResponse, FakeSession, make_png


@pytest.fixture(autouse=True)
def no_log_handlers(monkeypatch):
    monkeypatch.setattr(fetch_map, "init_logging", lambda level="": None)


def test_print_url(capsys):
    code = fetch_map.main(["40.714728,-73.998672", "--size", "640x480", "--markers", "color:red|Toronto", "--print-url"])
    out = capsys.readouterr().out.strip()
    assert code == 0
    assert out.startswith("https://maps.googleapis.com/maps/api/staticmap?")
    assert "center=40.714728%2C-73.998672" in out
    assert "size=640x480" in out
    assert "zoom=14" in out
    assert "markers=color%3Ared%7CToronto" in out


def test_repeated_style_flags_become_list():
    args = fetch_map.parse_args(["Toronto", "--style", "a:1", "--style", "b:2", "--zoom", "3"])
    assert fetch_map.options_from_args(args) == {"center": "Toronto", "zoom": 3, "style": ["a:1", "b:2"]}


def test_saves_image(tmp_path, monkeypatch):
    payload = make_png(40, 30)
    monkeypatch.setattr(requests, "Session", lambda: FakeSession(FakeResponse(content=payload)))
    out = tmp_path / "map.png"
    assert fetch_map.main(["Toronto", "--out", str(out), "--timeout", "5"]) == 0
    assert out.read_bytes() == payload


def test_load_failure_exit_code(tmp_path, monkeypatch):
    monkeypatch.setattr(requests, "Session", lambda: FakeSession(FakeResponse(status_code=403)))
    out = tmp_path / "map.png"
    assert fetch_map.main(["Toronto", "--out", str(out), "--timeout", "5"]) == 1
    assert not out.exists()
