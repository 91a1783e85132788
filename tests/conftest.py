# Shared fixtures: a small media tree on disk.

import pytest
from fastapi.testclient import TestClient

from storage_api.main import create_app

EXCLUDED = frozenset({".git", "node_modules", ".DS_Store", "server.js"})


def _sized(path, size):
    with open(path, "wb") as f:
        f.truncate(size)


@pytest.fixture
def storage(tmp_path):
    """photos/{a.jpg, b.txt}, clips/c.mp4 plus entries that must stay hidden."""
    photos = tmp_path / "photos"
    clips = tmp_path / "clips"
    photos.mkdir()
    clips.mkdir()

    (photos / "a.jpg").write_bytes(b"\xff" * 2048)
    (photos / "b.txt").write_bytes(b"0123456789")
    (photos / ".DS_Store").write_bytes(b"junk")
    _sized(clips / "c.mp4", 5_000_000)

    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "HEAD").write_text("ref: refs/heads/main")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "server.js").write_text("// not media")
    return tmp_path


@pytest.fixture
def excluded():
    return EXCLUDED


@pytest.fixture
def client(storage):
    app = create_app(storage_dir=storage, excluded=EXCLUDED)
    return TestClient(app)
