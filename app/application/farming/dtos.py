"""
Data Transfer Objects for the farming application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class CreateFarmCropCommand:
    """Input DTO for creating a crop directly under a farm.

    Attributes:
        farm_id: Farm that will own the new crop.
        name: Crop name.
        planted_area: Planted area, same unit as the farm size.
        planted_date: Planting date.
        harvest_date: Expected harvest date.
    """

    farm_id: int
    name: str
    planted_area: float
    planted_date: date
    harvest_date: date
