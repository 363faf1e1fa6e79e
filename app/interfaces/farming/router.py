"""
FastAPI routers for the farming bounded context.

All routes delegate to domain services or use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from app.application.farming.create_farm_crop import CreateFarmCropUseCase
from app.application.farming.dtos import CreateFarmCropCommand
from app.domain.farming.changes import CropChanges, FarmChanges
from app.domain.farming.crop_service import CropService
from app.domain.farming.entities import Crop, Farm, Fertilizer
from app.domain.farming.farm_service import FarmService
from app.domain.farming.fertilizer_service import FertilizerService
from app.interfaces.farming.dependencies import (
    get_create_farm_crop_use_case,
    get_crop_service,
    get_farm_service,
    get_fertilizer_service,
)
from app.interfaces.farming.schemas import (
    CropCreateRequest,
    CropResponse,
    CropUpdateRequest,
    ErrorResponse,
    FarmCreateRequest,
    FarmResponse,
    FarmUpdateRequest,
    FertilizerCreateRequest,
    FertilizerResponse,
)

NOT_FOUND = {404: {"model": ErrorResponse}}

farms_router = APIRouter(prefix="/farms", tags=["farms"])
crops_router = APIRouter(prefix="/crops", tags=["crops"])
fertilizers_router = APIRouter(prefix="/fertilizers", tags=["fertilizers"])


# ── Farms ────────────────────────────────────────────────────────────


@farms_router.get("", response_model=list[FarmResponse], summary="List farms")
def list_farms(
    service: FarmService = Depends(get_farm_service),
) -> list[FarmResponse]:
    """Return every farm."""
    return [FarmResponse.from_entity(farm) for farm in service.find_all()]


@farms_router.get(
    "/{farm_id}", response_model=FarmResponse, responses=NOT_FOUND, summary="Get a farm"
)
def get_farm(
    farm_id: int,
    service: FarmService = Depends(get_farm_service),
) -> FarmResponse:
    """Return a farm by ID."""
    return FarmResponse.from_entity(service.find_by_id(farm_id))


@farms_router.post(
    "",
    response_model=FarmResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a farm",
)
def create_farm(
    request: FarmCreateRequest,
    service: FarmService = Depends(get_farm_service),
) -> FarmResponse:
    """Create a farm."""
    farm = service.create(Farm(name=request.name, size=request.size))
    return FarmResponse.from_entity(farm)


@farms_router.patch(
    "/{farm_id}",
    response_model=FarmResponse,
    responses=NOT_FOUND,
    summary="Update a farm",
    description="Merge-patch: only present, non-blank values are applied.",
)
def update_farm(
    farm_id: int,
    request: FarmUpdateRequest,
    service: FarmService = Depends(get_farm_service),
) -> FarmResponse:
    """Apply a partial update to a farm."""
    changes = FarmChanges(name=request.name, size=request.size)
    return FarmResponse.from_entity(service.update(farm_id, changes))


@farms_router.delete(
    "/{farm_id}", response_model=FarmResponse, responses=NOT_FOUND, summary="Delete a farm"
)
def delete_farm(
    farm_id: int,
    service: FarmService = Depends(get_farm_service),
) -> FarmResponse:
    """Delete a farm and return it."""
    return FarmResponse.from_entity(service.delete_by_id(farm_id))


@farms_router.get(
    "/{farm_id}/crops",
    response_model=list[CropResponse],
    responses=NOT_FOUND,
    summary="List the crops of a farm",
)
def list_farm_crops(
    farm_id: int,
    service: FarmService = Depends(get_farm_service),
) -> list[CropResponse]:
    """Return the crops bound to a farm."""
    return [CropResponse.from_entity(crop) for crop in service.get_crops(farm_id)]


@farms_router.post(
    "/{farm_id}/crops",
    response_model=CropResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
    summary="Create a crop on a farm",
)
def create_farm_crop(
    farm_id: int,
    request: CropCreateRequest,
    use_case: CreateFarmCropUseCase = Depends(get_create_farm_crop_use_case),
) -> CropResponse:
    """Create a crop already bound to the farm."""
    command = CreateFarmCropCommand(
        farm_id=farm_id,
        name=request.name,
        planted_area=request.planted_area,
        planted_date=request.planted_date,
        harvest_date=request.harvest_date,
    )
    return CropResponse.from_entity(use_case.execute(command))


# ── Crops ────────────────────────────────────────────────────────────


@crops_router.get("", response_model=list[CropResponse], summary="List crops")
def list_crops(
    service: CropService = Depends(get_crop_service),
) -> list[CropResponse]:
    """Return every crop."""
    return [CropResponse.from_entity(crop) for crop in service.find_all()]


# Declared before "/{crop_id}" so "search" is not parsed as an ID.
@crops_router.get(
    "/search",
    response_model=list[CropResponse],
    summary="Search crops by harvest date",
    description="Return crops harvested between start and end, both inclusive.",
)
def search_crops_by_harvest_date(
    start: date = Query(..., description="First harvest date (inclusive)"),
    end: date = Query(..., description="Last harvest date (inclusive)"),
    service: CropService = Depends(get_crop_service),
) -> list[CropResponse]:
    """Return crops whose harvest date falls in the interval."""
    crops = service.get_crop_by_harvest_date_interval(start, end)
    return [CropResponse.from_entity(crop) for crop in crops]


@crops_router.get(
    "/{crop_id}", response_model=CropResponse, responses=NOT_FOUND, summary="Get a crop"
)
def get_crop(
    crop_id: int,
    service: CropService = Depends(get_crop_service),
) -> CropResponse:
    """Return a crop by ID."""
    return CropResponse.from_entity(service.find_by_id(crop_id))


@crops_router.post(
    "",
    response_model=CropResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an unassigned crop",
)
def create_crop(
    request: CropCreateRequest,
    service: CropService = Depends(get_crop_service),
) -> CropResponse:
    """Create a crop that belongs to no farm."""
    crop = service.create(
        Crop(
            name=request.name,
            planted_area=request.planted_area,
            planted_date=request.planted_date,
            harvest_date=request.harvest_date,
        )
    )
    return CropResponse.from_entity(crop)


@crops_router.patch(
    "/{crop_id}",
    response_model=CropResponse,
    responses=NOT_FOUND,
    summary="Update a crop",
    description="Merge-patch on name and planted area; a farmId rebinds the crop.",
)
def update_crop(
    crop_id: int,
    request: CropUpdateRequest,
    service: CropService = Depends(get_crop_service),
) -> CropResponse:
    """Apply a partial update to a crop."""
    changes = CropChanges(
        name=request.name,
        planted_area=request.planted_area,
        farm_id=request.farm_id,
    )
    return CropResponse.from_entity(service.update(crop_id, changes))


@crops_router.delete(
    "/{crop_id}", response_model=CropResponse, responses=NOT_FOUND, summary="Delete a crop"
)
def delete_crop(
    crop_id: int,
    service: CropService = Depends(get_crop_service),
) -> CropResponse:
    """Delete a crop and return it."""
    return CropResponse.from_entity(service.delete_by_id(crop_id))


@crops_router.put(
    "/{crop_id}/farm/{farm_id}",
    response_model=CropResponse,
    responses=NOT_FOUND,
    summary="Bind a crop to a farm",
)
def set_crop_farm(
    crop_id: int,
    farm_id: int,
    service: CropService = Depends(get_crop_service),
) -> CropResponse:
    """Bind a crop to a farm."""
    return CropResponse.from_entity(service.set_crop_farm(crop_id, farm_id))


@crops_router.delete(
    "/{crop_id}/farm",
    response_model=CropResponse,
    responses=NOT_FOUND,
    summary="Unbind a crop from its farm",
)
def remove_crop_farm(
    crop_id: int,
    service: CropService = Depends(get_crop_service),
) -> CropResponse:
    """Clear the farm of a crop."""
    return CropResponse.from_entity(service.remove_crop_farm(crop_id))


@crops_router.get(
    "/{crop_id}/fertilizers",
    response_model=list[FertilizerResponse],
    responses=NOT_FOUND,
    summary="List the fertilizers of a crop",
)
def list_crop_fertilizers(
    crop_id: int,
    service: CropService = Depends(get_crop_service),
) -> list[FertilizerResponse]:
    """Return the fertilizers associated with a crop."""
    return [
        FertilizerResponse.from_entity(fertilizer)
        for fertilizer in service.get_crop_fertilizers(crop_id)
    ]


@crops_router.post(
    "/{crop_id}/fertilizers/{fertilizer_id}",
    response_model=str,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
    summary="Associate a fertilizer with a crop",
)
def set_crop_fertilizer(
    crop_id: int,
    fertilizer_id: int,
    service: CropService = Depends(get_crop_service),
) -> str:
    """Associate a fertilizer with a crop and return a confirmation message."""
    return service.set_fertilizer_crop(crop_id, fertilizer_id)


# ── Fertilizers ──────────────────────────────────────────────────────


@fertilizers_router.get(
    "", response_model=list[FertilizerResponse], summary="List fertilizers"
)
def list_fertilizers(
    service: FertilizerService = Depends(get_fertilizer_service),
) -> list[FertilizerResponse]:
    """Return every fertilizer."""
    return [
        FertilizerResponse.from_entity(fertilizer)
        for fertilizer in service.get_all_fertilizers()
    ]


@fertilizers_router.get(
    "/{fertilizer_id}",
    response_model=FertilizerResponse,
    responses=NOT_FOUND,
    summary="Get a fertilizer",
)
def get_fertilizer(
    fertilizer_id: int,
    service: FertilizerService = Depends(get_fertilizer_service),
) -> FertilizerResponse:
    """Return a fertilizer by ID."""
    return FertilizerResponse.from_entity(service.get_fertilizer_by_id(fertilizer_id))


@fertilizers_router.post(
    "",
    response_model=FertilizerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a fertilizer",
)
def create_fertilizer(
    request: FertilizerCreateRequest,
    service: FertilizerService = Depends(get_fertilizer_service),
) -> FertilizerResponse:
    """Create a fertilizer."""
    fertilizer = service.create_fertilizer(
        Fertilizer(
            name=request.name,
            brand=request.brand,
            composition=request.composition,
        )
    )
    return FertilizerResponse.from_entity(fertilizer)


router = APIRouter()
router.include_router(farms_router)
router.include_router(crops_router)
router.include_router(fertilizers_router)
