"""
Adapter: Farm repository.

Implements FarmRepository port.
Persists and retrieves farms from the farms table.
"""

import logging
from dataclasses import replace
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine

from app.domain.farming.entities import Farm
from app.domain.farming.errors import FarmNotFoundError
from app.domain.farming.ports import FarmRepository
from app.infrastructure.farming.schema import farms

logger = logging.getLogger(__name__)


def _row_to_farm(row) -> Farm:
    return Farm(id=row["id"], name=row["name"], size=row["size"])


class FarmRepositoryAdapter(FarmRepository):
    """SQLAlchemy implementation of the farm repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find_by_id(self, farm_id: int) -> Optional[Farm]:
        """Return a farm by its ID, or None if not found."""
        query = select(farms).where(farms.c.id == farm_id)

        with self._engine.connect() as conn:
            row = conn.execute(query).mappings().first()

        return _row_to_farm(row) if row is not None else None

    def find_all(self) -> list[Farm]:
        """Return all farms ordered by ID."""
        with self._engine.connect() as conn:
            rows = conn.execute(select(farms).order_by(farms.c.id)).mappings().all()

        return [_row_to_farm(row) for row in rows]

    def save(self, farm: Farm) -> Farm:
        """Insert or update a farm.

        Args:
            farm: Farm to persist. Inserted when ``id`` is None.

        Returns:
            A copy of the farm carrying its persisted ID.

        Raises:
            FarmNotFoundError: If ``id`` is set but the farm was deleted.
        """
        values = {"name": farm.name, "size": farm.size}

        with self._engine.begin() as conn:
            if farm.id is None:
                result = conn.execute(insert(farms).values(**values))
                farm_id = result.inserted_primary_key[0]
            else:
                farm_id = farm.id
                result = conn.execute(
                    update(farms).where(farms.c.id == farm_id).values(**values)
                )
                if result.rowcount == 0:
                    raise FarmNotFoundError(farm_id)

        logger.debug("Saved farm_id=%d.", farm_id)
        return replace(farm, id=farm_id)

    def delete_by_id(self, farm_id: int) -> None:
        """Delete a farm. Its crops are unassigned by the foreign key."""
        with self._engine.begin() as conn:
            conn.execute(delete(farms).where(farms.c.id == farm_id))

        logger.debug("Deleted farm_id=%d.", farm_id)
