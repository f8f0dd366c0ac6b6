import abc
import logging
import uuid

from django.db import transaction

from .exceptions import NotFoundError
from .models import ParkingSpot
from .pagination import Page

logger = logging.getLogger(__name__)


class ParkingSpotRepository(abc.ABC):
    """Persistence interface used by the parking spot service."""

    @abc.abstractmethod
    def find_by_id(self, spot_id):
        pass

    @abc.abstractmethod
    def find_all(self, page_request):
        pass

    @abc.abstractmethod
    def exists_by_spot_number(self, spot_number, exclude_id=None):
        pass

    @abc.abstractmethod
    def exists_by_license_plate(self, license_plate, exclude_id=None):
        pass

    @abc.abstractmethod
    def exists_by_apartment_and_block(self, apartment, block, exclude_id=None):
        pass

    @abc.abstractmethod
    def save(self, spot):
        pass

    @abc.abstractmethod
    def delete(self, spot):
        pass


class DjangoParkingSpotRepository(ParkingSpotRepository):

    def _exists(self, exclude_id, **lookup):
        queryset = ParkingSpot.objects.filter(**lookup)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    def find_by_id(self, spot_id):
        try:
            return ParkingSpot.objects.get(id=uuid.UUID(str(spot_id)))
        except (ValueError, ParkingSpot.DoesNotExist):
            raise NotFoundError(spot_id)

    def find_all(self, page_request):
        queryset = ParkingSpot.objects.order_by(*page_request.order_by())
        return Page.from_queryset(queryset, page_request)

    def exists_by_spot_number(self, spot_number, exclude_id=None):
        return self._exists(exclude_id, spot_number=spot_number)

    def exists_by_license_plate(self, license_plate, exclude_id=None):
        return self._exists(exclude_id, license_plate=license_plate)

    def exists_by_apartment_and_block(self, apartment, block, exclude_id=None):
        return self._exists(exclude_id, apartment=apartment, block=block)

    def save(self, spot):
        # Savepoint so a unique-constraint failure leaves the outer transaction usable
        with transaction.atomic():
            spot.save()
        return spot

    def delete(self, spot):
        deleted, _ = ParkingSpot.objects.filter(id=spot.id).delete()
        if not deleted:
            raise NotFoundError(spot.id)
        logger.debug(f"Deleted parking spot row {spot.id}")
