class ParkingSpotError(Exception):
    """Base class for errors raised by the parking spot service."""


class ValidationError(ParkingSpotError):
    """Payload failed structural validation. `errors` maps field names to messages."""

    def __init__(self, errors):
        super().__init__('Invalid parking spot payload')
        self.errors = errors


class ConflictError(ParkingSpotError):
    """A uniqueness constraint would be violated by the write."""

    def __init__(self, message, constraint):
        super().__init__(message)
        self.message = message
        self.constraint = constraint


class NotFoundError(ParkingSpotError):
    def __init__(self, spot_id):
        super().__init__(f"Parking Spot {spot_id} not found")
        self.spot_id = spot_id
