from rest_framework import serializers
from parking_spots.models import ParkingSpot


class ParkingSpotSerializer(serializers.ModelSerializer):
    spotNumber = serializers.CharField(source='spot_number', read_only=True)
    licensePlate = serializers.CharField(source='license_plate', read_only=True)
    responsibleName = serializers.CharField(source='responsible_name', read_only=True)
    registeredAt = serializers.DateTimeField(source='registered_at', read_only=True)

    class Meta:
        model = ParkingSpot
        fields = [
            'id', 'spotNumber', 'licensePlate', 'brand', 'model', 'color',
            'responsibleName', 'apartment', 'block', 'registeredAt'
        ]
        read_only_fields = fields
