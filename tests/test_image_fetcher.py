import pytest
import requests

from squiremap.errors import MissingBackground
from squiremap.image_fetcher import ImageFetcher, load_background


class FakeResponse:
    def __init__(self, content=b"", status_code=200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_fetch_returns_body(monkeypatch, png_bytes):
    calls = []

    def fake_get(url, headers=None, timeout=None):
        calls.append((url, headers, timeout))
        return FakeResponse(png_bytes)

    monkeypatch.setattr(requests, "get", fake_get)

    data = ImageFetcher(user_agent="tests", timeout=5)("https://maps.example/westfall.png")

    assert data == png_bytes
    assert calls == [("https://maps.example/westfall.png", {"User-Agent": "tests"}, 5)]


def test_http_error_is_missing_background(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, headers=None, timeout=None: FakeResponse(status_code=404))

    with pytest.raises(MissingBackground):
        ImageFetcher().fetch("https://maps.example/missing.png")


def test_connection_error_is_missing_background(monkeypatch):
    def fake_get(url, headers=None, timeout=None):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(requests, "get", fake_get)

    with pytest.raises(MissingBackground):
        ImageFetcher().fetch("https://maps.example/westfall.png")


def test_empty_url_is_missing_background():
    with pytest.raises(MissingBackground):
        ImageFetcher().fetch("")


def test_load_background_converts_to_rgba(png_bytes):
    image = load_background(png_bytes)

    assert image.mode == "RGBA"
    assert image.size == (400, 400)


def test_load_background_rejects_garbage():
    with pytest.raises(MissingBackground):
        load_background(b"definitely not an image")
