from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from woot_irrigation_backend.serializers import GardenPlantSerializer, GardenerSerializer, CatalogPlantSerializer
from woot_irrigation_backend.services import add_plant, get_plants, remove_plant, get_gardener_by_id, \
    get_catalog_entries, get_catalog_entry, is_own_profile, Screen, OnboardingEvent, next_screen
from woot_irrigation_backend.utils import get_logger

logger = get_logger()


@api_view(['GET'])
@permission_classes([AllowAny])
def get_plant_catalog(request):
    return Response(CatalogPlantSerializer(get_catalog_entries(), many=True).data, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([AllowAny])
def get_catalog_plant(request, catalog_id):
    return Response(CatalogPlantSerializer(get_catalog_entry(catalog_id)).data, status=status.HTTP_200_OK)


class GardenPlantView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, user_id):
        if not is_own_profile(request.user, user_id):
            logger.warning(f"Unauthorized attempt to list plants by user '{request.user.name}'")
            return Response(status=status.HTTP_403_FORBIDDEN)

        get_gardener_by_id(user_id)
        return Response(GardenPlantSerializer(get_plants(user_id), many=True).data)

    def post(self, request, user_id):
        """
        Add a plant, either {"catalogId": "4"} or the full plant properties.
        :param request:
        :param user_id:
        :return: the updated gardener
        """
        if not is_own_profile(request.user, user_id):
            logger.warning(f"Unauthorized attempt to add a plant by user '{request.user.name}'")
            return Response(status=status.HTTP_403_FORBIDDEN)

        add_plant(user_id, request.data)
        return Response({
            'message': 'Plant added',
            'user': GardenerSerializer(get_gardener_by_id(user_id)).data,
            'nextScreen': next_screen(Screen.AddPlants, OnboardingEvent.PlantsAdded).value,
        }, status=status.HTTP_201_CREATED)


@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete_plant(request, user_id, plant_id):
    if not is_own_profile(request.user, user_id):
        logger.warning(f"Unauthorized attempt to remove a plant by user '{request.user.name}'")
        return Response(status=status.HTTP_403_FORBIDDEN)

    remove_plant(user_id, plant_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
