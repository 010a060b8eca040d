import pytest
from fastapi.testclient import TestClient

from taskboard import config
from taskboard.lib import paths, store


@pytest.fixture
def test_board(monkeypatch, tmp_path):
    """Isolated data directory and database per test.

    Points paths.data_dir() at tmp_path, clears the cached config and resets
    cached connections before and after the test.

    ALL tests touching store.ensure() must accept this fixture.
    """
    store._reset_for_testing()
    config.clear_cache()

    data_dir = tmp_path / "taskboard"
    data_dir.mkdir()
    monkeypatch.setattr(paths, "data_dir", lambda: data_dir)

    store.ensure()

    yield data_dir

    store._reset_for_testing()
    config.clear_cache()


@pytest.fixture
def client(test_board):
    from taskboard.api.main import app

    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def keywords(test_board):
    """Three keywords created in order; returns their ids."""
    from taskboard import keyword

    return [keyword.create_keyword(name).id for name in ("home", "work", "errand")]
