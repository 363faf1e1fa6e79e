"""
Change sets for merge-patch updates.

A change set names the fields a caller wants to overwrite. A field left
as None carries no change. A present value is applied only when it is
usable: text must contain a non-whitespace character and numbers must
not be NaN. Unusable values are ignored, never rejected.
"""

import math
from dataclasses import dataclass
from typing import Optional


def usable_text(value: Optional[str]) -> bool:
    """Return True if ``value`` is present and not blank."""
    return value is not None and value.strip() != ""


def usable_number(value: Optional[float]) -> bool:
    """Return True if ``value`` is present and not NaN."""
    return value is not None and not math.isnan(value)


@dataclass(frozen=True)
class FarmChanges:
    """Requested changes to a farm."""

    name: Optional[str] = None
    size: Optional[float] = None


@dataclass(frozen=True)
class CropChanges:
    """Requested changes to a crop.

    Planting and harvest dates cannot be changed through an update.
    ``farm_id`` rebinds the crop to another farm; it cannot clear the
    binding (use ``CropService.remove_crop_farm`` for that).
    """

    name: Optional[str] = None
    planted_area: Optional[float] = None
    farm_id: Optional[int] = None
