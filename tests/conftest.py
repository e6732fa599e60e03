# tests/conftest.py

from pathlib import Path

import mongomock
import pytest

from taskservice.app import create_app
from taskservice.utils.db import TaskStore


@pytest.fixture()
def static_dir(tmp_path: Path) -> Path:
    folder = tmp_path / "static"
    folder.mkdir()
    (folder / "index.html").write_text("<html><body>tasks client</body></html>")
    (folder / "app.js").write_text("console.log('client');")
    return folder


@pytest.fixture()
def store() -> TaskStore:
    """TaskStore over an in-process mongomock collection."""
    client = mongomock.MongoClient()
    return TaskStore(client["nodetask"]["tasks"], client=client)


@pytest.fixture()
def app(store: TaskStore, static_dir: Path):
    return create_app({"TESTING": True, "STATIC_FOLDER": str(static_dir)}, store=store)


@pytest.fixture()
def client(app):
    return app.test_client()
