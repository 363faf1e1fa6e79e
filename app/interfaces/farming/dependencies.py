"""
Dependency injection for the farming bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into domain services and use cases via constructor injection.
These are the composition root for the farming context.

The engine is the only shared handle. Tests override ``get_engine``
to point every service at a throwaway database.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.engine import Engine

from app.application.farming.create_farm_crop import CreateFarmCropUseCase
from app.core.config import settings
from app.domain.farming.crop_service import CropService
from app.domain.farming.farm_service import FarmService
from app.domain.farming.fertilizer_service import FertilizerService
from app.infrastructure.farming.crop_repository import CropRepositoryAdapter
from app.infrastructure.farming.database import create_database_engine
from app.infrastructure.farming.farm_repository import FarmRepositoryAdapter
from app.infrastructure.farming.fertilizer_repository import (
    FertilizerRepositoryAdapter,
)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return create_database_engine(settings.get_database_dsn())


def get_farm_service(engine: Engine = Depends(get_engine)) -> FarmService:
    """Build FarmService with its infrastructure dependencies."""
    return FarmService(
        farm_repo=FarmRepositoryAdapter(engine),
        crop_repo=CropRepositoryAdapter(engine),
    )


def get_fertilizer_service(engine: Engine = Depends(get_engine)) -> FertilizerService:
    """Build FertilizerService with its infrastructure dependencies."""
    return FertilizerService(fertilizer_repo=FertilizerRepositoryAdapter(engine))


def get_crop_service(engine: Engine = Depends(get_engine)) -> CropService:
    """Build CropService with the farm and fertilizer services it resolves through."""
    return CropService(
        crop_repo=CropRepositoryAdapter(engine),
        farm_service=get_farm_service(engine),
        fertilizer_service=get_fertilizer_service(engine),
    )


def get_create_farm_crop_use_case(
    engine: Engine = Depends(get_engine),
) -> CreateFarmCropUseCase:
    """Build CreateFarmCropUseCase with its infrastructure dependencies."""
    return CreateFarmCropUseCase(
        farm_service=get_farm_service(engine),
        crop_service=get_crop_service(engine),
    )
