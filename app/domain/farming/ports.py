"""
Port interfaces (ABCs) for the farming bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.farming.entities import Crop, Farm, Fertilizer


class FarmRepository(ABC):
    """Port for persisting and retrieving farms."""

    @abstractmethod
    def find_by_id(self, farm_id: int) -> Optional[Farm]:
        """Return a farm by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Farm]:
        """Return all farms."""
        raise NotImplementedError

    @abstractmethod
    def save(self, farm: Farm) -> Farm:
        """Insert the farm if it has no ID, otherwise update it.

        Returns:
            The persisted farm, carrying its assigned ID.

        Raises:
            FarmNotFoundError: If the farm has an ID but no longer exists.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, farm_id: int) -> None:
        """Delete the farm with the given ID."""
        raise NotImplementedError


class CropRepository(ABC):
    """Port for persisting and retrieving crops and their fertilizer links."""

    @abstractmethod
    def find_by_id(self, crop_id: int) -> Optional[Crop]:
        """Return a crop by its ID, or None if not found.

        The returned crop has its fertilizer list loaded.
        """
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Crop]:
        """Return all crops."""
        raise NotImplementedError

    @abstractmethod
    def find_by_farm_id(self, farm_id: int) -> list[Crop]:
        """Return the crops bound to the given farm."""
        raise NotImplementedError

    @abstractmethod
    def save(self, crop: Crop) -> Crop:
        """Insert the crop if it has no ID, otherwise update it.

        When ``crop.fertilizers`` is not None, the stored associations
        are replaced by that list, duplicates included.

        Returns:
            The persisted crop, carrying its assigned ID.

        Raises:
            CropNotFoundError: If the crop has an ID but no longer exists.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, crop_id: int) -> None:
        """Delete the crop with the given ID."""
        raise NotImplementedError


class FertilizerRepository(ABC):
    """Port for persisting and retrieving fertilizers."""

    @abstractmethod
    def find_by_id(self, fertilizer_id: int) -> Optional[Fertilizer]:
        """Return a fertilizer by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Fertilizer]:
        """Return all fertilizers."""
        raise NotImplementedError

    @abstractmethod
    def save(self, fertilizer: Fertilizer) -> Fertilizer:
        """Insert the fertilizer if it has no ID, otherwise update it.

        Raises:
            FertilizerNotFoundError: If the fertilizer has an ID but no
                longer exists.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, fertilizer_id: int) -> None:
        """Delete the fertilizer with the given ID."""
        raise NotImplementedError
