"""
Use case: Create a crop owned by a farm.

Input: CreateFarmCropCommand (farm_id, crop fields)
Output: Crop bound to the farm
Side effects: Inserts one crop row, already bound to the farm.
Failure cases: FarmNotFoundError (raised before anything is written).
"""

import logging

from app.application.farming.dtos import CreateFarmCropCommand
from app.domain.farming.crop_service import CropService
from app.domain.farming.entities import Crop
from app.domain.farming.farm_service import FarmService

logger = logging.getLogger(__name__)


class CreateFarmCropUseCase:
    """Orchestrates creating a crop under its farm.

    The farm is resolved first, then the crop is written once with its
    farm reference set.
    """

    def __init__(self, farm_service: FarmService, crop_service: CropService) -> None:
        self._farm_service = farm_service
        self._crop_service = crop_service

    def execute(self, command: CreateFarmCropCommand) -> Crop:
        """Run the create-farm-crop use case.

        Args:
            command: Farm ID and the fields of the new crop.

        Returns:
            The created crop, bound to the farm.

        Raises:
            FarmNotFoundError: If the farm does not exist.
        """
        logger.info("Creating crop '%s' for farm_id=%d", command.name, command.farm_id)

        farm = self._farm_service.find_by_id(command.farm_id)

        crop = self._crop_service.create(
            Crop(
                name=command.name,
                planted_area=command.planted_area,
                planted_date=command.planted_date,
                harvest_date=command.harvest_date,
                farm_id=farm.id,
            )
        )

        logger.info("Created crop_id=%d on farm_id=%d", crop.id, farm.id)
        return crop
