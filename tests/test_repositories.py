import uuid

from django.db import IntegrityError
from django.test import TestCase
from django.utils import timezone

from parking_spots.exceptions import NotFoundError
from parking_spots.models import ParkingSpot
from parking_spots.pagination import DESC, PageRequest
from parking_spots.repositories import DjangoParkingSpotRepository


def build_spot(index, **overrides):
    fields = {
        'spot_number': f'B{index:03d}',
        'license_plate': f'XYZ{index:04d}',
        'brand': 'Honda',
        'model': 'Civic',
        'color': 'Black',
        'responsible_name': 'Ana Lima',
        'apartment': str(200 + index),
        'block': 'B',
        'registered_at': timezone.now(),
    }
    fields.update(overrides)
    return ParkingSpot(**fields)


class DjangoParkingSpotRepositoryTests(TestCase):

    def setUp(self):
        self.repository = DjangoParkingSpotRepository()

    def test_save_and_find_by_id(self):
        spot = self.repository.save(build_spot(1))
        found = self.repository.find_by_id(spot.id)
        self.assertEqual(found.license_plate, 'XYZ0001')
        self.assertEqual(self.repository.find_by_id(str(spot.id)).pk, spot.pk)

    def test_find_by_id_unknown_or_malformed(self):
        for spot_id in [uuid.uuid4(), 'not-a-uuid']:
            with self.subTest(spot_id=spot_id):
                with self.assertRaises(NotFoundError):
                    self.repository.find_by_id(spot_id)

    def test_exists_queries_honour_exclusion(self):
        spot = self.repository.save(build_spot(1))
        self.assertTrue(self.repository.exists_by_spot_number('B001'))
        self.assertTrue(self.repository.exists_by_license_plate('XYZ0001'))
        self.assertTrue(self.repository.exists_by_apartment_and_block('201', 'B'))
        self.assertFalse(self.repository.exists_by_spot_number('B001', exclude_id=spot.id))
        self.assertFalse(self.repository.exists_by_license_plate('XYZ0001', exclude_id=spot.id))
        self.assertFalse(self.repository.exists_by_apartment_and_block('201', 'B', exclude_id=spot.id))
        self.assertFalse(self.repository.exists_by_apartment_and_block('201', 'C'))

    def test_storage_rejects_duplicates(self):
        self.repository.save(build_spot(1))
        duplicates = [
            build_spot(2, spot_number='B001'),
            build_spot(3, license_plate='XYZ0001'),
            build_spot(4, apartment='201'),
        ]
        for spot in duplicates:
            with self.subTest(spot=str(spot)):
                with self.assertRaises(IntegrityError):
                    self.repository.save(spot)
        # The failed savepoints leave the connection usable
        self.assertEqual(ParkingSpot.objects.count(), 1)

    def test_find_all_pages_and_counts(self):
        for index in range(1, 16):
            self.repository.save(build_spot(index))
        first = self.repository.find_all(PageRequest(page=0, size=10))
        second = self.repository.find_all(PageRequest(page=1, size=10))
        beyond = self.repository.find_all(PageRequest(page=5, size=10))
        self.assertEqual(len(first.content), 10)
        self.assertEqual(len(second.content), 5)
        self.assertEqual(beyond.content, [])
        self.assertEqual(first.total_elements, 15)
        self.assertEqual(first.total_pages, 2)
        self.assertTrue(first.is_first)
        self.assertTrue(second.is_last)
        ids = {spot.id for spot in first.content} | {spot.id for spot in second.content}
        self.assertEqual(len(ids), 15)

    def test_find_all_on_empty_table(self):
        page = self.repository.find_all(PageRequest(page=0, size=10))
        self.assertEqual(page.content, [])
        self.assertEqual(page.total_elements, 0)
        self.assertEqual(page.total_pages, 0)

    def test_find_all_page_far_past_the_end(self):
        self.repository.save(build_spot(1))
        page = self.repository.find_all(PageRequest(page=10 ** 17, size=100))
        self.assertEqual(page.content, [])
        self.assertEqual(page.total_elements, 1)
        self.assertTrue(page.is_last)

    def test_find_all_sorting(self):
        for index in (2, 3, 1):
            self.repository.save(build_spot(index))
        page = self.repository.find_all(PageRequest(page=0, size=10, sort=(('spotNumber', DESC),)))
        self.assertEqual([spot.spot_number for spot in page.content], ['B003', 'B002', 'B001'])

    def test_delete(self):
        spot = self.repository.save(build_spot(1))
        self.repository.delete(spot)
        self.assertFalse(ParkingSpot.objects.filter(id=spot.id).exists())
        with self.assertRaises(NotFoundError):
            self.repository.delete(spot)
