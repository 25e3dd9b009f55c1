from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from woot_irrigation_backend.serializers import CoordinatesSerializer, WaterRecommendationSerializer
from woot_irrigation_backend.services import get_water_recommendation, is_own_profile
from woot_irrigation_backend.utils import get_logger

logger = get_logger()


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_water_recommendation_view(request, user_id):
    """
    Today's watering recommendation for the gardener's active plant (or ?plantId=) at ?lat=&lon=.
    The weather is fetched once per call; on failure the client retries manually.
    """
    if not is_own_profile(request.user, user_id):
        logger.warning(f"Unauthorized attempt to get a water recommendation by user '{request.user.name}'")
        return Response(status=status.HTTP_403_FORBIDDEN)

    coordinates = CoordinatesSerializer(data=request.query_params)
    coordinates.is_valid(raise_exception=True)

    recommendation = get_water_recommendation(
        user_id,
        coordinates.validated_data['lat'],
        coordinates.validated_data['lon'],
        coordinates.validated_data.get('plantId'),
    )

    return Response(WaterRecommendationSerializer(recommendation).data, status=status.HTTP_200_OK)
