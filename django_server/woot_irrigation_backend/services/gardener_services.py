from django.contrib.auth import authenticate

from woot_irrigation_backend.exceptions import NotFoundException, InvalidInputException
from woot_irrigation_backend.forms import SignUpForm, LoginForm
from woot_irrigation_backend.models import Gardener
from woot_irrigation_backend.serializers import GardenerSerializer
from woot_irrigation_backend.utils import get_logger

logger = get_logger()


def register_gardener(data) -> Gardener:
    """
    Creates a new gardener account from the sign up payload.
    :param data: name, email, password and optionally location, soilType, flowRate, areaSize
    :return: the saved gardener
    """
    logger.debug("Attempting to register a new gardener.")
    form = SignUpForm(data)
    if not form.is_valid():
        logger.warning(f"Registration rejected: {form.errors.get_json_data()}")
        raise InvalidInputException(form.errors.get_json_data())

    gardener = form.save()
    logger.info(f"Registered gardener '{gardener.name}'.", extra={'resource_id': gardener.id})
    return gardener


def authenticate_gardener(request, data) -> Gardener:
    """
    Checks the credentials of a login request.
    :raises NotFoundException: no account exists for the email
    :raises InvalidInputException: the password does not match
    """
    form = LoginForm(data)
    if not form.is_valid():
        raise InvalidInputException(form.errors.get_json_data())

    email = form.cleaned_data.get('email').strip()
    password = form.cleaned_data.get('password')

    if not Gardener.objects.filter(username=email).exists():
        logger.warning("Login attempt for an unknown email.")
        raise NotFoundException("User not found.")

    gardener = authenticate(request, username=email, password=password)
    if gardener is None:
        logger.warning("Login attempt with a wrong password.")
        raise InvalidInputException("Wrong password.")

    logger.info(f"Gardener '{gardener.name}' logged in.", extra={'resource_id': gardener.id})
    return gardener


def is_own_profile(user, gardener_id) -> bool:
    return user.is_authenticated and str(user.id) == str(gardener_id)


def get_gardener_by_id(gardener_id) -> Gardener:
    gardener = Gardener.objects.prefetch_related('plants').filter(id=gardener_id).first()
    if gardener is None:
        logger.warning(f"Gardener with id: {gardener_id} was not found.")
        raise NotFoundException(f'User not found.')
    return gardener


def update_gardener(gardener_id, data) -> GardenerSerializer:
    """
    Settings update: replaces the given profile fields and irrigation parameters.
    """
    logger.debug("Attempting to update gardener settings.")
    gardener = get_gardener_by_id(gardener_id)
    serializer = GardenerSerializer(gardener, data=data, partial=True)
    if serializer.is_valid(raise_exception=True):
        serializer.save()
        logger.info(f"Updated settings for gardener '{gardener.name}'.", extra={'resource_id': gardener.id})
    return serializer
