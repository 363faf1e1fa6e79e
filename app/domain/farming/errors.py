"""
Domain-specific errors for the farming bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class FarmingDomainError(Exception):
    """Base error for all farming domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class FarmNotFoundError(FarmingDomainError):
    """Raised when no farm exists with the given identity."""

    def __init__(self, farm_id: int) -> None:
        super().__init__(f"Farm not found: {farm_id}")
        self.farm_id = farm_id


class CropNotFoundError(FarmingDomainError):
    """Raised when no crop exists with the given identity."""

    def __init__(self, crop_id: int) -> None:
        super().__init__(f"Crop not found: {crop_id}")
        self.crop_id = crop_id


class FertilizerNotFoundError(FarmingDomainError):
    """Raised when no fertilizer exists with the given identity."""

    def __init__(self, fertilizer_id: int) -> None:
        super().__init__(f"Fertilizer not found: {fertilizer_id}")
        self.fertilizer_id = fertilizer_id
