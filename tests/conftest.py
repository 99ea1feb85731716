"""
pytest configuration and fixtures.

Every test gets its own SQLite file under ``tmp_path``; the API fixture
injects that database into ``create_app`` so no environment variables
are needed.
"""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from places_api.app.core.db import Database
from places_api.app.main import create_app
from places_api.app.schemas.place import PlaceBase
from places_api.app.services.place_service import PlaceService


@pytest.fixture
def database(tmp_path) -> Database:
    db = Database(str(tmp_path / "places.db"))
    db.init_db()
    return db


@pytest.fixture
def service(database: Database) -> PlaceService:
    return PlaceService(database)


@pytest.fixture
def client(database: Database) -> Iterator[TestClient]:
    """Test client with the application lifespan running."""
    with TestClient(create_app(database=database)) as test_client:
        yield test_client


@pytest.fixture
def sample_places(service: PlaceService) -> list:
    """Two places whose names differ in case and content."""
    return [
        service.create_place(PlaceBase(name="Alpha House", address="1 First St", description="blue door")),
        service.create_place(PlaceBase(name="Beta Lodge", address="2 Second St", description="")),
    ]
