"""
Pydantic schemas for farming API request/response validation.

Field names are exposed in camelCase (``plantedArea``, ``farmId``);
snake_case is accepted on input as well.
Creation schemas enforce constraints. Update schemas are all-optional
and only cap name length; other unusable values are ignored by the domain.
No business logic belongs here.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.farming.entities import Crop, Farm, Fertilizer

NAME_MAX_LEN = 255


class CamelModel(BaseModel):
    """Base schema with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FarmCreateRequest(CamelModel):
    """Request schema for creating a farm.

    Attributes:
        name: Farm name.
        size: Farm area, strictly positive.
    """

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    size: float = Field(..., gt=0, description="Farm area")


class FarmUpdateRequest(CamelModel):
    """Request schema for a merge-patch on a farm."""

    name: Optional[str] = Field(default=None, max_length=NAME_MAX_LEN)
    size: Optional[float] = None


class FarmResponse(CamelModel):
    """Response schema for a farm."""

    id: int
    name: str
    size: float

    @classmethod
    def from_entity(cls, farm: Farm) -> "FarmResponse":
        return cls(id=farm.id, name=farm.name, size=farm.size)


class CropCreateRequest(CamelModel):
    """Request schema for creating a crop.

    Attributes:
        name: Crop name.
        planted_area: Planted area, strictly positive.
        planted_date: Planting date (ISO 8601).
        harvest_date: Expected harvest date (ISO 8601).
    """

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    planted_area: float = Field(..., gt=0, description="Planted area")
    planted_date: date
    harvest_date: date


class CropUpdateRequest(CamelModel):
    """Request schema for a merge-patch on a crop.

    Planting and harvest dates are not updatable.
    """

    name: Optional[str] = Field(default=None, max_length=NAME_MAX_LEN)
    planted_area: Optional[float] = None
    farm_id: Optional[int] = None


class CropResponse(CamelModel):
    """Response schema for a crop."""

    id: int
    name: str
    planted_area: float
    planted_date: Optional[date] = None
    harvest_date: Optional[date] = None
    farm_id: Optional[int] = None

    @classmethod
    def from_entity(cls, crop: Crop) -> "CropResponse":
        return cls(
            id=crop.id,
            name=crop.name,
            planted_area=crop.planted_area,
            planted_date=crop.planted_date,
            harvest_date=crop.harvest_date,
            farm_id=crop.farm_id,
        )


class FertilizerCreateRequest(CamelModel):
    """Request schema for creating a fertilizer."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    brand: str = Field(default="", max_length=NAME_MAX_LEN)
    composition: str = Field(default="", max_length=1024)


class FertilizerResponse(CamelModel):
    """Response schema for a fertilizer."""

    id: int
    name: str
    brand: str
    composition: str

    @classmethod
    def from_entity(cls, fertilizer: Fertilizer) -> "FertilizerResponse":
        return cls(
            id=fertilizer.id,
            name=fertilizer.name,
            brand=fertilizer.brand,
            composition=fertilizer.composition,
        )


class ErrorResponse(BaseModel):
    """Standard error response returned by the error handlers."""

    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
