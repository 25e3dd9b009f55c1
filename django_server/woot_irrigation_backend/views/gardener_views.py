from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from woot_irrigation_backend.serializers import GardenerSerializer
from woot_irrigation_backend.services import get_gardener_by_id, update_gardener, is_own_profile, Screen, \
    OnboardingEvent, next_screen
from woot_irrigation_backend.utils import get_logger

logger = get_logger()


class GardenerView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, user_id):
        if not is_own_profile(request.user, user_id):
            logger.warning(f"Unauthorized attempt to access a gardener profile by user '{request.user.name}'")
            return Response(status=status.HTTP_403_FORBIDDEN)

        return Response(GardenerSerializer(get_gardener_by_id(user_id)).data)

    def put(self, request, user_id):
        """
        Settings: replace name, email, location, soil type, flow rate and area size.
        :param request:
        :param user_id:
        :return:
        """
        if not is_own_profile(request.user, user_id):
            logger.warning(f"Unauthorized attempt to update a gardener profile by user '{request.user.name}'")
            return Response(status=status.HTTP_403_FORBIDDEN)

        serializer = update_gardener(user_id, request.data)
        return Response({
            'message': 'Settings saved',
            'user': serializer.data,
            'nextScreen': next_screen(Screen.Dashboard, OnboardingEvent.SettingsSaved, settings_open=True).value,
        }, status=status.HTTP_200_OK)
