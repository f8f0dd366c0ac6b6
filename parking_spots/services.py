import logging

from django.db import IntegrityError
from django.utils import timezone

from .exceptions import ConflictError
from .models import ParkingSpot
from .validators import validate_parking_spot

logger = logging.getLogger(__name__)

APARTMENT_BLOCK_CONFLICT = 'Conflict: Parking Spot already registered for this apartment/block!'
LICENSE_PLATE_CONFLICT = 'Conflict: License Plate Car is already in use!'
SPOT_NUMBER_CONFLICT = 'Conflict: Parking Spot is already in use!'


class ParkingSpotService:
    def __init__(self, repository):
        self.repository = repository

    def _check_conflicts(self, data, exclude_id=None):
        # Order is part of the contract: the first violated constraint is reported
        if self.repository.exists_by_apartment_and_block(data['apartment'], data['block'], exclude_id=exclude_id):
            raise ConflictError(APARTMENT_BLOCK_CONFLICT, 'apartment_block')
        if self.repository.exists_by_license_plate(data['license_plate'], exclude_id=exclude_id):
            raise ConflictError(LICENSE_PLATE_CONFLICT, 'license_plate')
        if self.repository.exists_by_spot_number(data['spot_number'], exclude_id=exclude_id):
            raise ConflictError(SPOT_NUMBER_CONFLICT, 'spot_number')

    def _save(self, spot, data, exclude_id=None):
        try:
            return self.repository.save(spot)
        except IntegrityError as e:
            # Usually another writer got past the existence checks first
            logger.warning(f"Storage rejected parking spot {data.get('spot_number')}: {str(e)}")
            self._check_conflicts(data, exclude_id=exclude_id)
            # No duplicate found: not a uniqueness race, let it surface as a storage failure
            raise

    def create(self, payload):
        data = validate_parking_spot(payload)
        self._check_conflicts(data)
        spot = ParkingSpot(**data)
        spot.registered_at = timezone.now()
        spot = self._save(spot, data)
        logger.info(f"Parking spot {spot.spot_number} registered with id {spot.id}")
        return spot

    def list(self, page_request):
        return self.repository.find_all(page_request)

    def get_by_id(self, spot_id):
        return self.repository.find_by_id(spot_id)

    def update(self, spot_id, payload):
        data = validate_parking_spot(payload)
        spot = self.repository.find_by_id(spot_id)
        self._check_conflicts(data, exclude_id=spot.id)
        for field, value in data.items():
            setattr(spot, field, value)
        spot = self._save(spot, data, exclude_id=spot.id)
        logger.info(f"Parking spot {spot.id} updated")
        return spot

    def delete(self, spot_id):
        spot = self.repository.find_by_id(spot_id)
        self.repository.delete(spot)
        logger.info(f"Parking spot {spot_id} deleted")
