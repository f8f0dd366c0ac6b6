from django.apps import AppConfig


class ParkingSpotsConfig(AppConfig):
    name = 'parking_spots'
