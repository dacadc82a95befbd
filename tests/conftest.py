"""Shared fixtures."""

import pytest

from captionsync.config import settings as settings_module


@pytest.fixture
def media_dir(tmp_path):
    """Directory with a media file and helpers to create captions next to it."""

    def touch(name: str, content: str = "") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    touch("movie.mkv")
    touch.root = tmp_path
    touch.media = str(tmp_path / "movie.mkv")
    return touch


@pytest.fixture
def fake_fs():
    """Existence probe backed by a set of paths, recording every probe."""

    class FakeFS:
        def __init__(self):
            self.files: set[str] = set()
            self.probes: list[str] = []

        def __call__(self, path: str) -> bool:
            self.probes.append(path)
            return path in self.files

    return FakeFS()


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Clear cached settings and caption-related environment between tests."""
    for var in (
        "CAPTION_EXTENSIONS",
        "MEDIA_EXTENSIONS",
        "CAPTION_ENCODING",
        "LOG_LEVEL",
        "LOG_USE_COLORS",
        "LOG_JSON_FORMAT",
        "LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(settings_module, "_settings", None)
    yield
