"""
Adapter: Crop repository.

Implements CropRepository port.
Persists crops to the crops table and their fertilizer associations
to the crop_fertilizers join table. Reads always return crops with
their fertilizer list loaded, in association order.
"""

import logging
from collections import defaultdict
from dataclasses import replace
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection, Engine

from app.domain.farming.entities import Crop, Fertilizer
from app.domain.farming.errors import CropNotFoundError
from app.domain.farming.ports import CropRepository
from app.infrastructure.farming.fertilizer_repository import row_to_fertilizer
from app.infrastructure.farming.schema import crop_fertilizers, crops, fertilizers

logger = logging.getLogger(__name__)


class CropRepositoryAdapter(CropRepository):
    """SQLAlchemy implementation of the crop repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find_by_id(self, crop_id: int) -> Optional[Crop]:
        """Return a crop with its fertilizers, or None if not found."""
        found = self._find_where(crops.c.id == crop_id)
        return found[0] if found else None

    def find_all(self) -> list[Crop]:
        """Return all crops ordered by ID."""
        return self._find_where(None)

    def find_by_farm_id(self, farm_id: int) -> list[Crop]:
        """Return the crops bound to a farm, ordered by ID."""
        return self._find_where(crops.c.farm_id == farm_id)

    def save(self, crop: Crop) -> Crop:
        """Insert or update a crop and, if loaded, its fertilizer links.

        The crop row and its association rows are written in one
        transaction. An uninitialized fertilizer list leaves existing
        association rows untouched.

        Args:
            crop: Crop to persist. Inserted when ``id`` is None.

        Returns:
            A copy of the crop carrying its persisted ID.

        Raises:
            CropNotFoundError: If ``id`` is set but no such row exists.
        """
        values = {
            "name": crop.name,
            "planted_area": crop.planted_area,
            "planted_date": crop.planted_date,
            "harvest_date": crop.harvest_date,
            "farm_id": crop.farm_id,
        }

        with self._engine.begin() as conn:
            if crop.id is None:
                result = conn.execute(insert(crops).values(**values))
                crop_id = result.inserted_primary_key[0]
            else:
                crop_id = crop.id
                result = conn.execute(
                    update(crops).where(crops.c.id == crop_id).values(**values)
                )
                if result.rowcount == 0:
                    raise CropNotFoundError(crop_id)

            if crop.fertilizers is not None:
                self._replace_fertilizers(conn, crop_id, crop.fertilizers)

        logger.debug("Saved crop_id=%d.", crop_id)
        fertilizer_list = list(crop.fertilizers) if crop.fertilizers is not None else None
        return replace(crop, id=crop_id, fertilizers=fertilizer_list)

    def delete_by_id(self, crop_id: int) -> None:
        """Delete a crop. Its association rows are removed by the foreign key."""
        with self._engine.begin() as conn:
            conn.execute(delete(crops).where(crops.c.id == crop_id))

        logger.debug("Deleted crop_id=%d.", crop_id)

    def _find_where(self, condition) -> list[Crop]:
        query = select(crops).order_by(crops.c.id)
        if condition is not None:
            query = query.where(condition)

        with self._engine.connect() as conn:
            rows = conn.execute(query).mappings().all()
            links = self._load_fertilizers(conn, [row["id"] for row in rows])

        return [
            Crop(
                id=row["id"],
                name=row["name"],
                planted_area=row["planted_area"],
                planted_date=row["planted_date"],
                harvest_date=row["harvest_date"],
                farm_id=row["farm_id"],
                fertilizers=links.get(row["id"], []),
            )
            for row in rows
        ]

    @staticmethod
    def _load_fertilizers(
        conn: Connection, crop_ids: list[int]
    ) -> dict[int, list[Fertilizer]]:
        """Return the fertilizers of each crop, in association order."""
        if not crop_ids:
            return {}

        query = (
            select(crop_fertilizers.c.crop_id, fertilizers)
            .select_from(
                crop_fertilizers.join(
                    fertilizers, crop_fertilizers.c.fertilizer_id == fertilizers.c.id
                )
            )
            .where(crop_fertilizers.c.crop_id.in_(crop_ids))
            .order_by(crop_fertilizers.c.id)
        )

        links: dict[int, list[Fertilizer]] = defaultdict(list)
        for row in conn.execute(query).mappings():
            links[row["crop_id"]].append(row_to_fertilizer(row))
        return links

    @staticmethod
    def _replace_fertilizers(
        conn: Connection, crop_id: int, crop_fertilizer_list: list[Fertilizer]
    ) -> None:
        conn.execute(delete(crop_fertilizers).where(crop_fertilizers.c.crop_id == crop_id))
        if not crop_fertilizer_list:
            return
        conn.execute(
            insert(crop_fertilizers),
            [
                {"crop_id": crop_id, "fertilizer_id": fertilizer.id}
                for fertilizer in crop_fertilizer_list
            ],
        )
