import uuid

from django.db import models


class ParkingSpot(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    spot_number = models.CharField(max_length=10, unique=True)
    license_plate = models.CharField(max_length=7, unique=True)
    brand = models.CharField(max_length=70)
    model = models.CharField(max_length=70)
    color = models.CharField(max_length=70)
    responsible_name = models.CharField(max_length=130)
    apartment = models.CharField(max_length=30)
    block = models.CharField(max_length=30)
    registered_at = models.DateTimeField()  # set once by the service on create

    class Meta:
        db_table = 'parking_spot'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(
                fields=['apartment', 'block'],
                name='unique_parking_spot_apartment_block',
            ),
        ]

    def __str__(self):
        return f"{self.spot_number} - {self.license_plate}"
