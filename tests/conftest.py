"""
Shared pytest fixtures.

Storage-backed fixtures run the real SQLAlchemy adapters against a
throwaway SQLite file per test, with foreign keys switched on.
"""

import os

# Must be set before app.core.config is imported.
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["CREATE_SCHEMA_ON_STARTUP"] = "true"

import pytest

from app.domain.farming.crop_service import CropService
from app.domain.farming.farm_service import FarmService
from app.domain.farming.fertilizer_service import FertilizerService
from app.infrastructure.farming.crop_repository import CropRepositoryAdapter
from app.infrastructure.farming.database import create_database_engine, init_schema
from app.infrastructure.farming.farm_repository import FarmRepositoryAdapter
from app.infrastructure.farming.fertilizer_repository import (
    FertilizerRepositoryAdapter,
)


@pytest.fixture
def engine(tmp_path):
    """A fresh SQLite database with the farming schema."""
    engine = create_database_engine(f"sqlite:///{tmp_path / 'agrix.db'}")
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def farm_repo(engine) -> FarmRepositoryAdapter:
    return FarmRepositoryAdapter(engine)


@pytest.fixture
def crop_repo(engine) -> CropRepositoryAdapter:
    return CropRepositoryAdapter(engine)


@pytest.fixture
def fertilizer_repo(engine) -> FertilizerRepositoryAdapter:
    return FertilizerRepositoryAdapter(engine)


@pytest.fixture
def farm_service(farm_repo, crop_repo) -> FarmService:
    return FarmService(farm_repo=farm_repo, crop_repo=crop_repo)


@pytest.fixture
def fertilizer_service(fertilizer_repo) -> FertilizerService:
    return FertilizerService(fertilizer_repo=fertilizer_repo)


@pytest.fixture
def crop_service(crop_repo, farm_service, fertilizer_service) -> CropService:
    return CropService(
        crop_repo=crop_repo,
        farm_service=farm_service,
        fertilizer_service=fertilizer_service,
    )
