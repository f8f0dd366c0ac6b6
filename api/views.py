from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from rest_framework.exceptions import APIException
import logging
from parking_spots.exceptions import ConflictError, NotFoundError, ValidationError
from parking_spots.repositories import DjangoParkingSpotRepository
from parking_spots.services import ParkingSpotService
from .pagination import page_envelope, page_request_from_query
from .serializers import ParkingSpotSerializer

# Initialize logger
logger = logging.getLogger(__name__)

parking_spot_service = ParkingSpotService(repository=DjangoParkingSpotRepository())

NOT_FOUND_MESSAGE = 'Parking Spot not found.'


def validation_error_response(e):
    return Response(
        {'status': 'error', 'message': e.errors},
        status=status.HTTP_400_BAD_REQUEST
    )


def request_error_response(e):
    return Response(
        {'status': 'error', 'message': str(e.detail)},
        status=e.status_code
    )


def conflict_response(e):
    return Response(
        {'status': 'error', 'message': e.message, 'constraint': e.constraint},
        status=status.HTTP_409_CONFLICT
    )


def not_found_response():
    return Response(
        {'status': 'error', 'message': NOT_FOUND_MESSAGE},
        status=status.HTTP_404_NOT_FOUND
    )


def server_error_response():
    return Response(
        {'status': 'error', 'message': 'An unexpected error occurred'},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


class HealthCheckAPIView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'status': 'ok', 'message': 'Hello World!'}, status=status.HTTP_200_OK)


class ParkingSpotListCreateAPIView(APIView):
    permission_classes = [AllowAny]
    service = parking_spot_service

    def get(self, request):
        try:
            page_request = page_request_from_query(request.query_params)
            page = self.service.list(page_request)
            logger.info(
                f"Parking spots page {page_request.page} retrieved: "
                f"{len(page.content)} of {page.total_elements}"
            )
            content = ParkingSpotSerializer(page.content, many=True).data
            return Response(page_envelope(page, content), status=status.HTTP_200_OK)
        except ValidationError as e:
            logger.error(f"Invalid paging parameters: {e.errors}")
            return validation_error_response(e)
        except Exception as e:
            logger.exception(f"Error listing parking spots: {str(e)}")
            return server_error_response()

    def post(self, request):
        try:
            spot = self.service.create(request.data)
            return Response(ParkingSpotSerializer(spot).data, status=status.HTTP_201_CREATED)
        except APIException as e:
            logger.error(f"Unreadable parking spot request: {str(e)}")
            return request_error_response(e)
        except ValidationError as e:
            logger.error(f"Parking spot creation failed: {e.errors}")
            return validation_error_response(e)
        except ConflictError as e:
            logger.warning(f"Parking spot creation rejected: {e.message}")
            return conflict_response(e)
        except Exception as e:
            logger.exception(f"Error creating parking spot: {str(e)}")
            return server_error_response()


class ParkingSpotDetailAPIView(APIView):
    permission_classes = [AllowAny]
    service = parking_spot_service

    def get(self, request, spot_id):
        try:
            spot = self.service.get_by_id(spot_id)
            return Response(ParkingSpotSerializer(spot).data, status=status.HTTP_200_OK)
        except NotFoundError:
            logger.warning(f"Parking spot not found: {spot_id}")
            return not_found_response()
        except Exception as e:
            logger.exception(f"Error retrieving parking spot {spot_id}: {str(e)}")
            return server_error_response()

    def put(self, request, spot_id):
        try:
            spot = self.service.update(spot_id, request.data)
            return Response(ParkingSpotSerializer(spot).data, status=status.HTTP_200_OK)
        except APIException as e:
            logger.error(f"Unreadable parking spot request: {str(e)}")
            return request_error_response(e)
        except ValidationError as e:
            logger.error(f"Parking spot {spot_id} update failed: {e.errors}")
            return validation_error_response(e)
        except NotFoundError:
            logger.warning(f"Parking spot not found for update: {spot_id}")
            return not_found_response()
        except ConflictError as e:
            logger.warning(f"Parking spot {spot_id} update rejected: {e.message}")
            return conflict_response(e)
        except Exception as e:
            logger.exception(f"Error updating parking spot {spot_id}: {str(e)}")
            return server_error_response()

    def delete(self, request, spot_id):
        try:
            self.service.delete(spot_id)
            return Response(
                {'status': 'success', 'message': 'Parking Spot deleted successfully.'},
                status=status.HTTP_200_OK
            )
        except NotFoundError:
            logger.warning(f"Parking spot not found for delete: {spot_id}")
            return not_found_response()
        except Exception as e:
            logger.exception(f"Error deleting parking spot {spot_id}: {str(e)}")
            return server_error_response()
