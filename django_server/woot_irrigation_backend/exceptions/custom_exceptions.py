from rest_framework import status
from rest_framework.exceptions import APIException


class NotFoundException(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found.'
    default_code = 'not_found'


class InvalidInputException(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'invalid_input'


class InvalidCoordinatesException(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid coordinates.'
    default_code = 'invalid_coordinates'


class WeatherProviderUnavailableException(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = 'Failed to fetch weather.'
    default_code = 'weather_unavailable'


class WeatherProviderNotConfiguredException(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Weather provider not configured.'
    default_code = 'weather_not_configured'
