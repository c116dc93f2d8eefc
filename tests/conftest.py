"""Shared fixtures: throwaway in-memory SQLite databases and the default dataset."""

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

import soroka_food.db.session  # noqa: F401  registers every table model
from soroka_food.db.fixtures import DEFAULT_FIXTURE, load_fixture


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as sess:
        yield sess


@pytest.fixture(scope="session")
def fixture_data():
    return load_fixture(DEFAULT_FIXTURE)
