import uuid

import pytest

from woot_irrigation_backend.models import GardenPlant

pytestmark = pytest.mark.django_db


def test_plant_catalog_is_public(api_client):
    response = api_client.get('/api/plants')

    assert response.status_code == 200
    assert len(response.data) == 10
    assert response.data[0] == {
        'id': '1',
        'name': 'Tomato',
        'soilType': 'Loamy',
        'moistureRange': '60-80%',
        'droughtTolerance': 'Low',
        'cropCoefficient': 1.15,
    }


def test_catalog_plant(api_client):
    response = api_client.get('/api/plants/7')

    assert response.status_code == 200
    assert response.data['name'] == 'Lavender'


def test_unknown_catalog_plant(api_client):
    response = api_client.get('/api/plants/42')

    assert response.status_code == 404
    assert response.data['error'] == 'Resource not found.'


def test_add_catalog_plant(auth_client, gardener):
    response = auth_client.post(f'/api/users/{gardener.id}/plants', {'catalogId': '4'}, format='json')

    assert response.status_code == 201
    assert response.data['message'] == 'Plant added'
    assert response.data['nextScreen'] == 'dashboard'
    plant = response.data['user']['plants'][0]
    assert plant['catalogId'] == '4'
    assert plant['name'] == 'Lettuce'
    assert plant['cropCoefficient'] == 1.0


def test_catalog_plants_are_copied_by_value(auth_client, gardener):
    auth_client.post(f'/api/users/{gardener.id}/plants', {'catalogId': '1'}, format='json')
    auth_client.post(f'/api/users/{gardener.id}/plants', {'catalogId': '1'}, format='json')

    plants = GardenPlant.objects.filter(gardener=gardener)
    assert plants.count() == 2
    assert len({plant.id for plant in plants}) == 2


def test_add_custom_plant(auth_client, gardener):
    response = auth_client.post(f'/api/users/{gardener.id}/plants', {
        'name': 'Fern',
        'soilType': 'Peaty',
        'moistureRange': '70-90%',
        'droughtTolerance': 'Low',
        'cropCoefficient': 0.8,
    }, format='json')

    assert response.status_code == 201
    plant = response.data['user']['plants'][0]
    assert plant['catalogId'] is None
    assert plant['name'] == 'Fern'


@pytest.mark.parametrize("data", [
    {'name': 'Fern', 'cropCoefficient': 0},
    {'name': 'Fern'},
    {'cropCoefficient': 1.0},
    {'name': 'Fern', 'cropCoefficient': 1.0, 'droughtTolerance': 'Extreme'},
])
def test_add_invalid_custom_plant(auth_client, gardener, data):
    response = auth_client.post(f'/api/users/{gardener.id}/plants', data, format='json')

    assert response.status_code == 400
    assert GardenPlant.objects.count() == 0


def test_add_unknown_catalog_plant(auth_client, gardener):
    response = auth_client.post(f'/api/users/{gardener.id}/plants', {'catalogId': '99'}, format='json')

    assert response.status_code == 404


def test_list_plants(auth_client, gardener, lettuce):
    response = auth_client.get(f'/api/users/{gardener.id}/plants')

    assert response.status_code == 200
    assert [plant['id'] for plant in response.data] == [str(lettuce.id)]


def test_delete_plant(auth_client, gardener, lettuce):
    url = f'/api/users/{gardener.id}/plants/{lettuce.id}'

    assert auth_client.delete(url).status_code == 204
    assert GardenPlant.objects.count() == 0
    assert auth_client.delete(url).status_code == 404


def test_delete_unknown_plant(auth_client, gardener):
    assert auth_client.delete(f'/api/users/{gardener.id}/plants/{uuid.uuid4()}').status_code == 404


def test_plants_of_others_are_forbidden(auth_client, other_gardener):
    assert auth_client.get(f'/api/users/{other_gardener.id}/plants').status_code == 403
    assert auth_client.post(f'/api/users/{other_gardener.id}/plants', {'catalogId': '1'},
                            format='json').status_code == 403
    assert auth_client.delete(f'/api/users/{other_gardener.id}/plants/{uuid.uuid4()}').status_code == 403
