import pytest
from rest_framework.test import APIClient

from woot_irrigation_backend.models import Gardener, GardenPlant
from woot_irrigation_backend.utils import PLANT_CATALOG


@pytest.fixture(autouse=True)
def weather_settings(settings):
    settings.WEATHER_PROVIDER = 'openweathermap'
    settings.OPENWEATHER_API_KEY = 'test-key'
    settings.OPENWEATHER_URL = 'https://weather.test/data/2.5/weather'
    settings.OPEN_METEO_URL = 'https://meteo.test/v1/forecast'
    settings.WEATHER_REQUEST_TIMEOUT = 3
    return settings


@pytest.fixture
def api_client():
    return APIClient()


def create_gardener(email='ada@example.com', password='secret', **fields):
    fields.setdefault('name', 'Ada')
    return Gardener.objects.create_user(username=email, email=email, password=password, **fields)


@pytest.fixture
def gardener(db):
    return create_gardener(location='Berlin', soilType='Loamy', flowRate=5, areaSize=10)


@pytest.fixture
def other_gardener(db):
    return create_gardener(email='bob@example.com', name='Bob', flowRate=2, areaSize=4)


@pytest.fixture
def auth_client(api_client, gardener):
    api_client.force_login(gardener)
    return api_client


@pytest.fixture
def lettuce(gardener):
    profile = PLANT_CATALOG['4']
    return GardenPlant.objects.create(
        gardener=gardener,
        catalogId='4',
        name=profile.name,
        soilType=profile.soil_type,
        moistureRange=profile.moisture_range,
        droughtTolerance=profile.drought_tolerance,
        cropCoefficient=profile.crop_coefficient,
    )
