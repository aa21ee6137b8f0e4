import pytest
from fastapi.testclient import TestClient

from filedrop_backend.app.core.config import Settings
from filedrop_backend.app.main import create_app

INDEX_HTML = "<html><body>filedrop test index</body></html>"


@pytest.fixture
def storage_dir(tmp_path):
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def static_dir(tmp_path):
    path = tmp_path / "static"
    path.mkdir()
    (path / "index.html").write_text(INDEX_HTML)
    (path / "hello.txt").write_text("hello")
    return path


@pytest.fixture
def make_client(static_dir):
    """Build a client whose app stores uploads in the given directory."""

    def _make(storage_path):
        settings = Settings(storage_dir=str(storage_path), static_dir=str(static_dir))
        return TestClient(create_app(settings))

    return _make


@pytest.fixture
def client(make_client, storage_dir):
    return make_client(storage_dir)
