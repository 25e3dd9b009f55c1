from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from woot_irrigation_backend.services import get_log_messages_by_amount, is_own_profile

DEFAULT_LOG_AMOUNT = 20


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_log_messages(request, resource_id):
    if not is_own_profile(request.user, resource_id):
        return Response(status=status.HTTP_403_FORBIDDEN)

    try:
        amount = int(request.GET.get('amount', DEFAULT_LOG_AMOUNT))
    except ValueError:
        return Response({'error': 'Invalid input.', 'details': 'amount must be an integer.'},
                        status=status.HTTP_400_BAD_REQUEST)

    serializer = get_log_messages_by_amount(resource_id, max(amount, 0))
    return Response(serializer.data, status=status.HTTP_200_OK)
