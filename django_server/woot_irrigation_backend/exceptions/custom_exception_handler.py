import logging

from django.core.exceptions import PermissionDenied
from django.db import IntegrityError
from django.http import Http404
from rest_framework import status, exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler

from woot_irrigation_backend.utils import get_logger
from .custom_exceptions import NotFoundException

logger = get_logger()

# URL kwargs naming the gardener an error belongs to, in order of preference
RESOURCE_ID_KWARGS = ('user_id', 'resource_id')


def _related_resource_id(context):
    kwargs = context.get('kwargs') or {}
    return next((kwargs[name] for name in RESOURCE_ID_KWARGS if name in kwargs), None)


def custom_exception_handler(exc, context):
    """
    Renders every error as {"error": <summary>, "details": <detail>} and logs it for the related gardener.
    Client errors are logged as warnings, everything else as errors.
    """
    resource_id = _related_resource_id(context)

    if isinstance(exc, IntegrityError):
        logger.error(f"A database integrity error occurred. {exc}", extra={'resource_id': resource_id})
        return Response(
            {"error": "A database integrity error occurred.", "details": str(exc)},
            status=status.HTTP_400_BAD_REQUEST
        )

    if isinstance(exc, Http404):
        exc = NotFoundException()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)
    if response is None:
        logger.error(f"An unexpected error occurred. {exc}", extra={'resource_id': resource_id})
        return Response(
            {"error": "An unexpected error occurred.", "details": str(exc)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    level = logging.WARNING if response.status_code < 500 else logging.ERROR
    logger.log(level, f"{exc.default_detail} {exc.detail}", extra={'resource_id': resource_id})
    response.data = {"error": exc.default_detail, "details": exc.detail}
    return response
