"""
Adapter: Fertilizer repository.

Implements FertilizerRepository port.
Persists and retrieves fertilizers from the fertilizers table.
"""

import logging
from dataclasses import replace
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine

from app.domain.farming.entities import Fertilizer
from app.domain.farming.errors import FertilizerNotFoundError
from app.domain.farming.ports import FertilizerRepository
from app.infrastructure.farming.schema import fertilizers

logger = logging.getLogger(__name__)


def row_to_fertilizer(row) -> Fertilizer:
    """Map a fertilizers row (or a mapping with the same keys) to an entity."""
    return Fertilizer(
        id=row["id"],
        name=row["name"],
        brand=row["brand"],
        composition=row["composition"],
    )


class FertilizerRepositoryAdapter(FertilizerRepository):
    """SQLAlchemy implementation of the fertilizer repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find_by_id(self, fertilizer_id: int) -> Optional[Fertilizer]:
        query = select(fertilizers).where(fertilizers.c.id == fertilizer_id)

        with self._engine.connect() as conn:
            row = conn.execute(query).mappings().first()

        return row_to_fertilizer(row) if row is not None else None

    def find_all(self) -> list[Fertilizer]:
        with self._engine.connect() as conn:
            rows = conn.execute(
                select(fertilizers).order_by(fertilizers.c.id)
            ).mappings().all()

        return [row_to_fertilizer(row) for row in rows]

    def save(self, fertilizer: Fertilizer) -> Fertilizer:
        """Insert or update a fertilizer and return it with its ID.

        Updating a fertilizer that no longer exists raises
        FertilizerNotFoundError; its ID is never re-inserted.
        """
        values = {
            "name": fertilizer.name,
            "brand": fertilizer.brand,
            "composition": fertilizer.composition,
        }

        with self._engine.begin() as conn:
            if fertilizer.id is None:
                result = conn.execute(insert(fertilizers).values(**values))
                fertilizer_id = result.inserted_primary_key[0]
            else:
                fertilizer_id = fertilizer.id
                result = conn.execute(
                    update(fertilizers)
                    .where(fertilizers.c.id == fertilizer_id)
                    .values(**values)
                )
                if result.rowcount == 0:
                    raise FertilizerNotFoundError(fertilizer_id)

        logger.debug("Saved fertilizer_id=%d.", fertilizer_id)
        return replace(fertilizer, id=fertilizer_id)

    def delete_by_id(self, fertilizer_id: int) -> None:
        with self._engine.begin() as conn:
            conn.execute(delete(fertilizers).where(fertilizers.c.id == fertilizer_id))

        logger.debug("Deleted fertilizer_id=%d.", fertilizer_id)
