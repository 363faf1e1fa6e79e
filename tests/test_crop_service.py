"""
Tests for CropService.

Tests the crop hub with mocked ports: lookup order, error propagation,
merge-patch rules, association changes and the harvest interval filter.
"""

from copy import deepcopy
from datetime import date
from unittest.mock import MagicMock

import pytest

from app.domain.farming.changes import CropChanges
from app.domain.farming.crop_service import FERTILIZER_ASSOCIATED_MESSAGE, CropService
from app.domain.farming.entities import Crop, Farm, Fertilizer
from app.domain.farming.errors import (
    CropNotFoundError,
    FarmNotFoundError,
    FertilizerNotFoundError,
)
from app.domain.farming.farm_service import FarmService
from app.domain.farming.fertilizer_service import FertilizerService
from app.domain.farming.ports import CropRepository


def _crop(
    crop_id: int = 1,
    harvest: date = date(2024, 7, 1),
    farm_id: int | None = None,
    fertilizers: list[Fertilizer] | None = None,
) -> Crop:
    return Crop(
        id=crop_id,
        name="Corn",
        planted_area=30.0,
        planted_date=date(2024, 3, 1),
        harvest_date=harvest,
        farm_id=farm_id,
        fertilizers=fertilizers,
    )


UREA = Fertilizer(id=4, name="Urea", brand="AgroMax", composition="46% N")


@pytest.fixture
def crop_repo() -> MagicMock:
    repo = MagicMock(spec=CropRepository)
    repo.save.side_effect = lambda crop: crop
    return repo


@pytest.fixture
def farm_service() -> MagicMock:
    service = MagicMock(spec=FarmService)
    service.find_by_id.side_effect = lambda farm_id: Farm(id=farm_id, name="Farm", size=1.0)
    return service


@pytest.fixture
def fertilizer_service() -> MagicMock:
    service = MagicMock(spec=FertilizerService)
    service.get_fertilizer_by_id.return_value = UREA
    return service


@pytest.fixture
def service(crop_repo, farm_service, fertilizer_service) -> CropService:
    return CropService(
        crop_repo=crop_repo,
        farm_service=farm_service,
        fertilizer_service=fertilizer_service,
    )


class TestCropLookup:
    """Tests for find_by_id, find_all and create."""

    def test_find_by_id_missing_raises(self, service, crop_repo) -> None:
        crop_repo.find_by_id.return_value = None
        with pytest.raises(CropNotFoundError) as exc_info:
            service.find_by_id(8)
        assert exc_info.value.crop_id == 8

    def test_create_standalone_crop(self, service, crop_repo) -> None:
        """A crop can be created without a farm."""
        crop = Crop(name="Rice", planted_area=12.0)
        service.create(crop)
        crop_repo.save.assert_called_once_with(crop)


class TestCropUpdate:
    """Tests for the merge-patch update."""

    def test_only_name_changes(self, service, crop_repo) -> None:
        """Fields not named in the change set stay identical."""
        original = _crop(farm_id=2, fertilizers=[UREA])
        crop_repo.find_by_id.return_value = deepcopy(original)

        updated = service.update(1, CropChanges(name="Wheat"))

        assert updated.name == "Wheat"
        assert updated.planted_area == original.planted_area
        assert updated.planted_date == original.planted_date
        assert updated.harvest_date == original.harvest_date
        assert updated.farm_id == original.farm_id
        assert updated.fertilizers == original.fertilizers

    def test_blank_name_and_nan_area_are_ignored(self, service, crop_repo) -> None:
        crop_repo.find_by_id.return_value = _crop()
        updated = service.update(1, CropChanges(name=" ", planted_area=float("nan")))
        assert updated == _crop()

    def test_planted_area_changes(self, service, crop_repo) -> None:
        crop_repo.find_by_id.return_value = _crop()
        assert service.update(1, CropChanges(planted_area=45.5)).planted_area == 45.5

    def test_farm_id_rebinds_crop(self, service, crop_repo, farm_service) -> None:
        crop_repo.find_by_id.return_value = _crop(farm_id=1)
        updated = service.update(1, CropChanges(farm_id=2))
        assert updated.farm_id == 2
        farm_service.find_by_id.assert_called_once_with(2)

    def test_no_farm_id_keeps_binding(self, service, crop_repo, farm_service) -> None:
        crop_repo.find_by_id.return_value = _crop(farm_id=1)
        assert service.update(1, CropChanges(name="Wheat")).farm_id == 1
        farm_service.find_by_id.assert_not_called()

    def test_missing_farm_propagates(self, service, crop_repo, farm_service) -> None:
        crop_repo.find_by_id.return_value = _crop()
        farm_service.find_by_id.side_effect = FarmNotFoundError(99)

        with pytest.raises(FarmNotFoundError):
            service.update(1, CropChanges(name="Wheat", farm_id=99))
        crop_repo.save.assert_not_called()

    def test_missing_crop_raises(self, service, crop_repo) -> None:
        crop_repo.find_by_id.return_value = None
        with pytest.raises(CropNotFoundError):
            service.update(1, CropChanges(name="Wheat"))


class TestCropDelete:
    """Tests for delete_by_id."""

    def test_delete_returns_snapshot(self, service, crop_repo) -> None:
        crop_repo.find_by_id.return_value = _crop(fertilizers=[UREA])
        assert service.delete_by_id(1) == _crop(fertilizers=[UREA])
        crop_repo.delete_by_id.assert_called_once_with(1)


class TestCropFarmBinding:
    """Tests for set_crop_farm and remove_crop_farm."""

    def test_set_crop_farm(self, service, crop_repo) -> None:
        crop_repo.find_by_id.return_value = _crop()
        assert service.set_crop_farm(1, 5).farm_id == 5
        crop_repo.save.assert_called_once()

    def test_missing_crop_is_reported_before_farm(
        self, service, crop_repo, farm_service
    ) -> None:
        """When both are missing, the crop lookup fails first."""
        crop_repo.find_by_id.return_value = None
        farm_service.find_by_id.side_effect = FarmNotFoundError(5)

        with pytest.raises(CropNotFoundError):
            service.set_crop_farm(1, 5)
        farm_service.find_by_id.assert_not_called()

    def test_missing_farm_after_crop_found(self, service, crop_repo, farm_service) -> None:
        crop_repo.find_by_id.return_value = _crop()
        farm_service.find_by_id.side_effect = FarmNotFoundError(5)

        with pytest.raises(FarmNotFoundError):
            service.set_crop_farm(1, 5)
        crop_repo.save.assert_not_called()

    def test_remove_crop_farm_keeps_fertilizers(self, service, crop_repo) -> None:
        crop_repo.find_by_id.return_value = _crop(farm_id=3, fertilizers=[UREA])
        crop = service.remove_crop_farm(1)
        assert crop.farm_id is None
        assert crop.fertilizers == [UREA]


class TestFertilizerAssociation:
    """Tests for set_fertilizer_crop and get_crop_fertilizers."""

    def test_returns_confirmation_message(self, service, crop_repo) -> None:
        crop_repo.find_by_id.return_value = _crop(fertilizers=[])
        assert service.set_fertilizer_crop(1, 4) == FERTILIZER_ASSOCIATED_MESSAGE
        saved = crop_repo.save.call_args.args[0]
        assert saved.fertilizers == [UREA]

    def test_initializes_missing_association(self, service, crop_repo) -> None:
        crop_repo.find_by_id.return_value = _crop(fertilizers=None)
        service.set_fertilizer_crop(1, 4)
        assert crop_repo.save.call_args.args[0].fertilizers == [UREA]

    def test_repeated_association_is_not_deduplicated(self, service, crop_repo) -> None:
        """Associating the same pair twice stores the fertilizer twice."""
        crop = _crop(fertilizers=[])
        crop_repo.find_by_id.return_value = crop

        service.set_fertilizer_crop(1, 4)
        service.set_fertilizer_crop(1, 4)

        assert crop.fertilizers == [UREA, UREA]

    def test_missing_crop_is_reported_before_fertilizer(
        self, service, crop_repo, fertilizer_service
    ) -> None:
        crop_repo.find_by_id.return_value = None
        with pytest.raises(CropNotFoundError):
            service.set_fertilizer_crop(1, 4)
        fertilizer_service.get_fertilizer_by_id.assert_not_called()

    def test_missing_fertilizer_propagates(
        self, service, crop_repo, fertilizer_service
    ) -> None:
        crop_repo.find_by_id.return_value = _crop(fertilizers=[])
        fertilizer_service.get_fertilizer_by_id.side_effect = FertilizerNotFoundError(4)

        with pytest.raises(FertilizerNotFoundError):
            service.set_fertilizer_crop(1, 4)
        crop_repo.save.assert_not_called()

    def test_get_crop_fertilizers(self, service, crop_repo) -> None:
        crop_repo.find_by_id.return_value = _crop(fertilizers=[UREA])
        assert service.get_crop_fertilizers(1) == [UREA]

    def test_uninitialized_fertilizers_read_as_empty(self, service, crop_repo) -> None:
        crop_repo.find_by_id.return_value = _crop(fertilizers=None)
        assert service.get_crop_fertilizers(1) == []

    def test_get_crop_fertilizers_missing_crop(self, service, crop_repo) -> None:
        crop_repo.find_by_id.return_value = None
        with pytest.raises(CropNotFoundError):
            service.get_crop_fertilizers(1)


class TestHarvestDateInterval:
    """Tests for get_crop_by_harvest_date_interval."""

    def test_bounds_are_inclusive(self, service, crop_repo) -> None:
        may = _crop(1, date(2024, 5, 1))
        july = _crop(2, date(2024, 7, 1))
        new_year = _crop(3, date(2024, 1, 1))
        crop_repo.find_all.return_value = [may, july, new_year]

        result = service.get_crop_by_harvest_date_interval(date(2024, 1, 1), date(2024, 6, 30))

        assert result == [may, new_year]

    def test_end_bound_is_inclusive(self, service, crop_repo) -> None:
        crop_repo.find_all.return_value = [_crop(1, date(2024, 6, 30))]
        result = service.get_crop_by_harvest_date_interval(date(2024, 6, 1), date(2024, 6, 30))
        assert len(result) == 1

    def test_crops_without_harvest_date_are_skipped(self, service, crop_repo) -> None:
        undated = Crop(id=9, name="Beans", planted_area=1.0)
        crop_repo.find_all.return_value = [undated]
        assert service.get_crop_by_harvest_date_interval(date.min, date.max) == []

    def test_empty_collection(self, service, crop_repo) -> None:
        crop_repo.find_all.return_value = []
        assert service.get_crop_by_harvest_date_interval(date(2024, 1, 1), date(2024, 12, 31)) == []
