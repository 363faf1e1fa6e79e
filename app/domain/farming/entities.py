"""
Domain entities for the farming bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
Identities are assigned by storage on insert; an entity with ``id=None``
has never been persisted.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Farm:
    """A farm owning zero or more crops.

    The farm does not hold its crops. The reverse collection is
    derived by querying crops on their ``farm_id``.
    """

    name: str
    size: float
    id: Optional[int] = None


@dataclass
class Fertilizer:
    """A fertilizer that can be applied to crops."""

    name: str
    brand: str = ""
    composition: str = ""
    id: Optional[int] = None


@dataclass
class Crop:
    """A crop planted on (at most) one farm.

    Attributes:
        name: Crop name.
        planted_area: Planted area, same unit as ``Farm.size``.
        planted_date: Date the crop was planted.
        harvest_date: Expected harvest date. Expected to be on or after
            ``planted_date`` but not enforced.
        farm_id: Owning farm, or None when the crop is unassigned.
        fertilizers: Associated fertilizers in association order. May hold
            the same fertilizer more than once. None means the association
            was never loaded or initialized.
        id: Storage identity.
    """

    name: str
    planted_area: float
    planted_date: Optional[date] = None
    harvest_date: Optional[date] = None
    farm_id: Optional[int] = None
    fertilizers: Optional[list[Fertilizer]] = None
    id: Optional[int] = None

    def harvested_between(self, start: date, end: date) -> bool:
        """Return True if the harvest date lies in ``[start, end]``."""
        if self.harvest_date is None:
            return False
        return start <= self.harvest_date <= end
