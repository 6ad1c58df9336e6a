from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from propcatalog.adapters.metadata import FileSystemMetadataStore
from propcatalog.adapters.sqlalchemy import start_mappers
from propcatalog.adapters.sqlalchemy.migrations import upgrade_head
from propcatalog.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    SqlAlchemyRunUnitOfWork,
    shutdown,
    startup,
)

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    start_mappers()
    upgrade_head(engine=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def started_adapter(sqlite_engine: Engine) -> Iterator[Engine]:
    startup(engine=sqlite_engine, force=True)
    try:
        yield sqlite_engine
    finally:
        shutdown()


@pytest.fixture
def catalog_unit_of_work(
    started_adapter: Engine,
) -> Callable[[], SqlAlchemyCatalogUnitOfWork]:
    _ = started_adapter

    def factory() -> SqlAlchemyCatalogUnitOfWork:
        return SqlAlchemyCatalogUnitOfWork()

    return factory


@pytest.fixture
def run_unit_of_work(
    started_adapter: Engine,
) -> Callable[[], SqlAlchemyRunUnitOfWork]:
    _ = started_adapter

    def factory() -> SqlAlchemyRunUnitOfWork:
        return SqlAlchemyRunUnitOfWork()

    return factory


@pytest.fixture
def metadata_store(tmp_path: Path) -> FileSystemMetadataStore:
    return FileSystemMetadataStore(tmp_path / "metadata")
