"""
Domain service: Crop management.

The crop service is the hub of the farming context. Every crop → farm
binding and every crop → fertilizer association passes through it, and
it validates the referenced entities through the farm and fertilizer
services before anything is persisted.

Multi-entity operations resolve their entities in a fixed order (crop
first) and propagate the first lookup failure unchanged.
"""

from datetime import date

from app.domain.farming.changes import CropChanges, usable_number, usable_text
from app.domain.farming.entities import Crop, Fertilizer
from app.domain.farming.errors import CropNotFoundError
from app.domain.farming.farm_service import FarmService
from app.domain.farming.fertilizer_service import FertilizerService
from app.domain.farming.ports import CropRepository

FERTILIZER_ASSOCIATED_MESSAGE = "Fertilizante e plantação associados com sucesso!"


class CropService:
    """Domain service for crops and their associations."""

    def __init__(
        self,
        crop_repo: CropRepository,
        farm_service: FarmService,
        fertilizer_service: FertilizerService,
    ) -> None:
        """Initialize the crop service.

        Args:
            crop_repo: Repository for crops and crop-fertilizer links.
            farm_service: Used to resolve and validate farm references.
            fertilizer_service: Used to resolve and validate fertilizers.
        """
        self._crop_repo = crop_repo
        self._farm_service = farm_service
        self._fertilizer_service = fertilizer_service

    def find_by_id(self, crop_id: int) -> Crop:
        """Return the crop with the given ID.

        Raises:
            CropNotFoundError: If the crop does not exist.
        """
        crop = self._crop_repo.find_by_id(crop_id)
        if crop is None:
            raise CropNotFoundError(crop_id)
        return crop

    def find_all(self) -> list[Crop]:
        """Return all crops in storage order."""
        return self._crop_repo.find_all()

    def create(self, crop: Crop) -> Crop:
        """Persist a new crop. The farm reference may be unset."""
        return self._crop_repo.save(crop)

    def update(self, crop_id: int, changes: CropChanges) -> Crop:
        """Apply a merge-patch to an existing crop.

        ``name`` and ``planted_area`` are overwritten only with usable
        values. A present ``farm_id`` is resolved and rebinds the crop.

        Args:
            crop_id: ID of the crop to change.
            changes: Requested field changes.

        Returns:
            The merged and persisted crop.

        Raises:
            CropNotFoundError: If the crop does not exist.
            FarmNotFoundError: If ``changes.farm_id`` names a missing farm.
        """
        crop = self.find_by_id(crop_id)

        if usable_text(changes.name):
            crop.name = changes.name
        if usable_number(changes.planted_area):
            crop.planted_area = changes.planted_area
        if changes.farm_id is not None:
            farm = self._farm_service.find_by_id(changes.farm_id)
            crop.farm_id = farm.id

        return self._crop_repo.save(crop)

    def delete_by_id(self, crop_id: int) -> Crop:
        """Delete a crop and return its last persisted state.

        Raises:
            CropNotFoundError: If the crop does not exist.
        """
        crop = self.find_by_id(crop_id)
        self._crop_repo.delete_by_id(crop_id)
        return crop

    def set_crop_farm(self, crop_id: int, farm_id: int) -> Crop:
        """Bind a crop to a farm.

        Raises:
            CropNotFoundError: If the crop does not exist. Checked first.
            FarmNotFoundError: If the farm does not exist.
        """
        crop = self.find_by_id(crop_id)
        farm = self._farm_service.find_by_id(farm_id)

        crop.farm_id = farm.id

        return self._crop_repo.save(crop)

    def remove_crop_farm(self, crop_id: int) -> Crop:
        """Unbind a crop from its farm. Fertilizers are left as they are.

        Raises:
            CropNotFoundError: If the crop does not exist.
        """
        crop = self.find_by_id(crop_id)

        crop.farm_id = None

        return self._crop_repo.save(crop)

    def set_fertilizer_crop(self, crop_id: int, fertilizer_id: int) -> str:
        """Associate a fertilizer with a crop.

        The association is appended without checking for an existing
        entry, so repeating the call stores the pair again.

        Returns:
            A confirmation message, not the changed crop.

        Raises:
            CropNotFoundError: If the crop does not exist. Checked first.
            FertilizerNotFoundError: If the fertilizer does not exist.
        """
        crop = self.find_by_id(crop_id)
        fertilizer = self._fertilizer_service.get_fertilizer_by_id(fertilizer_id)

        if crop.fertilizers is None:
            crop.fertilizers = []
        # TODO: decide whether a repeated (crop, fertilizer) pair should be
        # rejected or skipped, and add a unique constraint on crop_fertilizers
        # if so.
        crop.fertilizers.append(fertilizer)

        self._crop_repo.save(crop)

        return FERTILIZER_ASSOCIATED_MESSAGE

    def get_crop_fertilizers(self, crop_id: int) -> list[Fertilizer]:
        """Return the fertilizers associated with a crop.

        An uninitialized association reads as an empty list.

        Raises:
            CropNotFoundError: If the crop does not exist.
        """
        crop = self.find_by_id(crop_id)
        return list(crop.fertilizers or [])

    def get_crop_by_harvest_date_interval(self, start: date, end: date) -> list[Crop]:
        """Return crops whose harvest date lies in ``[start, end]``.

        Filters the full crop collection in memory. Both bounds are
        inclusive. Crops without a harvest date never match.
        """
        return [crop for crop in self.find_all() if crop.harvested_between(start, end)]
