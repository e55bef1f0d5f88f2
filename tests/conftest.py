from __future__ import annotations

from io import BytesIO

import pytest
from PIL import Image

from bgfill_service import config, removebg_client


def _png_bytes(size=(4, 3), color=(10, 20, 30, 255)) -> bytes:
    buf = BytesIO()
    Image.new("RGBA", size, color).save(buf, format="PNG")
    return buf.getvalue()


class FakeResponse:
    def __init__(self, status_code=200, content=b"", text=""):
        self.status_code = status_code
        self.content = content
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400


class FakeRemoveBg:
    """Stands in for `requests.post` and records every call."""

    def __init__(self):
        self.calls = []
        self.response = FakeResponse(200, content=_png_bytes((5, 7), (0, 0, 255, 128)))

    def __call__(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        return self.response


@pytest.fixture
def make_png():
    return _png_bytes


@pytest.fixture
def assets_dir(tmp_path):
    root = tmp_path / "assets"
    (root / "base").mkdir(parents=True)
    (root / "send").mkdir()
    (root / "base" / "background1.png").write_bytes(_png_bytes((8, 8), (200, 0, 0, 255)))
    (root / "base" / "background2.jpg").write_bytes(_png_bytes((2, 2), (0, 200, 0, 255)))
    (root / "base" / "notes.txt").write_text("not an image")
    return root


@pytest.fixture(autouse=True)
def settings_env(monkeypatch, tmp_path, assets_dir):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("REMOVEBG_API_KEY", "test-key")
    monkeypatch.setenv("ASSETS_DIR", str(assets_dir))
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


@pytest.fixture
def fake_removebg(monkeypatch):
    fake = FakeRemoveBg()
    monkeypatch.setattr(removebg_client.requests, "post", fake)
    return fake


@pytest.fixture
def fake_response():
    return FakeResponse
