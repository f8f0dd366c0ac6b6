import re

from rest_framework import serializers

from .exceptions import ValidationError

LICENSE_PLATE_PATTERN = re.compile(r'^[A-Z0-9]{1,7}$')

# API field name -> ParkingSpot model field
PAYLOAD_FIELDS = {
    'spotNumber': 'spot_number',
    'licensePlate': 'license_plate',
    'brand': 'brand',
    'model': 'model',
    'color': 'color',
    'responsibleName': 'responsible_name',
    'apartment': 'apartment',
    'block': 'block',
}


def normalize_license_plate(value):
    return value.upper().replace(' ', '')


class ParkingSpotPayloadSerializer(serializers.Serializer):
    spotNumber = serializers.CharField(max_length=10)
    licensePlate = serializers.CharField()
    brand = serializers.CharField(max_length=70)
    model = serializers.CharField(max_length=70)
    color = serializers.CharField(max_length=70)
    responsibleName = serializers.CharField(max_length=130)
    apartment = serializers.CharField(max_length=30)
    block = serializers.CharField(max_length=30)

    def validate_licensePlate(self, value):
        value = normalize_license_plate(value)
        if not LICENSE_PLATE_PATTERN.match(value):
            raise serializers.ValidationError(
                'Invalid license plate format. Use up to 7 alphanumeric characters'
            )
        return value


def validate_parking_spot(data):
    """
    Check an inbound parking spot payload and return its values keyed by
    model field name. Raises ValidationError with per-field messages.
    Unknown keys (including id and registeredAt) are dropped.
    """
    serializer = ParkingSpotPayloadSerializer(data=data)
    if not serializer.is_valid():
        raise ValidationError(
            {field: [str(message) for message in messages] for field, messages in serializer.errors.items()}
        )
    return {PAYLOAD_FIELDS[field]: value for field, value in serializer.validated_data.items()}
