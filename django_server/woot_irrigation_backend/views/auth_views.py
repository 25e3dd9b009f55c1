from django.contrib.auth import login, logout
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from woot_irrigation_backend.serializers import GardenerSerializer
from woot_irrigation_backend.services import register_gardener, authenticate_gardener, Screen, OnboardingEvent, \
    next_screen


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def register_view(request):
    """
    Create an account and start a session for it. The client continues with selecting plants.
    """
    gardener = register_gardener(request.data)
    login(request, gardener, backend='django.contrib.auth.backends.ModelBackend')
    return Response({
        'message': 'Registered',
        'user': GardenerSerializer(gardener).data,
        'nextScreen': next_screen(Screen.CreateAccount, OnboardingEvent.AccountCreated).value,
    }, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login_view(request):
    gardener = authenticate_gardener(request, request.data)
    login(request, gardener)
    return Response({
        'message': 'Login success',
        'user': GardenerSerializer(gardener).data,
        'nextScreen': next_screen(Screen.Login, OnboardingEvent.LoggedIn).value,
    }, status=status.HTTP_200_OK)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout_view(request):
    logout(request)
    return Response({
        'message': 'Logged out',
        'nextScreen': next_screen(Screen.Dashboard, OnboardingEvent.LoggedOut).value,
    }, status=status.HTTP_200_OK)
