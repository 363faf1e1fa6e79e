"""
Domain service: Fertilizer catalog.

Plain lookup and creation. No relational logic lives here; linking a
fertilizer to a crop is owned by the crop service.
"""

from app.domain.farming.entities import Fertilizer
from app.domain.farming.errors import FertilizerNotFoundError
from app.domain.farming.ports import FertilizerRepository


class FertilizerService:
    """Domain service for fertilizers."""

    def __init__(self, fertilizer_repo: FertilizerRepository) -> None:
        self._fertilizer_repo = fertilizer_repo

    def get_fertilizer_by_id(self, fertilizer_id: int) -> Fertilizer:
        """Return the fertilizer with the given ID.

        Raises:
            FertilizerNotFoundError: If the fertilizer does not exist.
        """
        fertilizer = self._fertilizer_repo.find_by_id(fertilizer_id)
        if fertilizer is None:
            raise FertilizerNotFoundError(fertilizer_id)
        return fertilizer

    def get_all_fertilizers(self) -> list[Fertilizer]:
        return self._fertilizer_repo.find_all()

    def create_fertilizer(self, fertilizer: Fertilizer) -> Fertilizer:
        return self._fertilizer_repo.save(fertilizer)
