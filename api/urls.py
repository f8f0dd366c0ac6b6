from django.urls import path

from .views import (
    HealthCheckAPIView,
    ParkingSpotListCreateAPIView,
    ParkingSpotDetailAPIView,
)

urlpatterns = [
    path('', HealthCheckAPIView.as_view(), name='health-check'),
    path('parking-spot', ParkingSpotListCreateAPIView.as_view(), name='parking-spot-list'),
    path('parking-spot/<str:spot_id>', ParkingSpotDetailAPIView.as_view(), name='parking-spot-detail'),
]
