"""Shared fixtures: a list repository and controller over a temporary directory."""

from pathlib import Path

import pytest

from controller import ListsController
from filestore import FileStore
from storage import ListRepository
from write_queue import WriteQueue


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "lists"


@pytest.fixture()
def store(data_dir: Path) -> FileStore:
    return FileStore(data_dir)


@pytest.fixture()
def repository(store: FileStore) -> ListRepository:
    return ListRepository(store)


@pytest.fixture()
def controller(repository: ListRepository):
    ctrl = ListsController(repository, WriteQueue(max_workers=2))
    ctrl.load()
    yield ctrl
    ctrl.close()
