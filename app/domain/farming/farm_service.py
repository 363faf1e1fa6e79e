"""
Domain service: Farm management.

Owns farm lookup, creation, merge-patch update and deletion, and
resolves the crops bound to a farm. Storage is reached only through
the injected repository ports.
"""

from app.domain.farming.changes import FarmChanges, usable_number, usable_text
from app.domain.farming.entities import Crop, Farm
from app.domain.farming.errors import FarmNotFoundError
from app.domain.farming.ports import CropRepository, FarmRepository


class FarmService:
    """Domain service for farms.

    Deleting a farm does not touch its crops here; what happens to them
    is decided by the storage foreign key.
    """

    def __init__(self, farm_repo: FarmRepository, crop_repo: CropRepository) -> None:
        """Initialize the farm service.

        Args:
            farm_repo: Repository for farms.
            crop_repo: Repository used to resolve the crops of a farm.
        """
        self._farm_repo = farm_repo
        self._crop_repo = crop_repo

    def find_by_id(self, farm_id: int) -> Farm:
        """Return the farm with the given ID.

        Raises:
            FarmNotFoundError: If the farm does not exist.
        """
        farm = self._farm_repo.find_by_id(farm_id)
        if farm is None:
            raise FarmNotFoundError(farm_id)
        return farm

    def find_all(self) -> list[Farm]:
        """Return all farms in storage order."""
        return self._farm_repo.find_all()

    def create(self, farm: Farm) -> Farm:
        """Persist a new farm and return it with its assigned ID."""
        return self._farm_repo.save(farm)

    def update(self, farm_id: int, changes: FarmChanges) -> Farm:
        """Apply a merge-patch to an existing farm.

        Only usable values in ``changes`` are written. Everything else
        keeps its persisted value.

        Args:
            farm_id: ID of the farm to change.
            changes: Requested field changes.

        Returns:
            The merged and persisted farm.

        Raises:
            FarmNotFoundError: If the farm does not exist.
        """
        farm = self.find_by_id(farm_id)

        if usable_text(changes.name):
            farm.name = changes.name
        if usable_number(changes.size):
            farm.size = changes.size

        return self._farm_repo.save(farm)

    def delete_by_id(self, farm_id: int) -> Farm:
        """Delete a farm and return its last persisted state.

        Raises:
            FarmNotFoundError: If the farm does not exist.
        """
        farm = self.find_by_id(farm_id)
        self._farm_repo.delete_by_id(farm_id)
        return farm

    def get_crops(self, farm_id: int) -> list[Crop]:
        """Return the crops bound to a farm.

        Raises:
            FarmNotFoundError: If the farm does not exist.
        """
        farm = self.find_by_id(farm_id)
        return self._crop_repo.find_by_farm_id(farm.id)
