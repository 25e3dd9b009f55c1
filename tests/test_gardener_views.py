import pytest

pytestmark = pytest.mark.django_db


def test_get_own_profile(auth_client, gardener, lettuce):
    response = auth_client.get(f'/api/users/{gardener.id}')

    assert response.status_code == 200
    assert response.data['name'] == 'Ada'
    assert response.data['location'] == 'Berlin'
    assert response.data['flowRate'] == 5
    assert [plant['name'] for plant in response.data['plants']] == ['Lettuce']
    assert 'password' not in response.data


def test_profiles_of_others_are_forbidden(auth_client, other_gardener):
    assert auth_client.get(f'/api/users/{other_gardener.id}').status_code == 403
    assert auth_client.put(f'/api/users/{other_gardener.id}', {'name': 'Eve'}, format='json').status_code == 403


def test_profile_requires_a_session(api_client, gardener):
    assert api_client.get(f'/api/users/{gardener.id}').status_code == 403


def test_save_settings(auth_client, gardener):
    response = auth_client.put(f'/api/users/{gardener.id}', {
        'name': ' Ada Lovelace ',
        'location': 'London',
        'soilType': 'Clay',
        'flowRate': 7.5,
        'areaSize': 20,
    }, format='json')

    assert response.status_code == 200
    assert response.data['message'] == 'Settings saved'
    assert response.data['nextScreen'] == 'dashboard'
    assert response.data['user']['name'] == 'Ada Lovelace'
    assert response.data['user']['flowRate'] == 7.5

    gardener.refresh_from_db()
    assert gardener.location == 'London'
    assert gardener.areaSize == 20


@pytest.mark.parametrize("data, field", [
    ({'flowRate': 0}, 'flowRate'),
    ({'areaSize': -3}, 'areaSize'),
    ({'soilType': 'Gravel'}, 'soilType'),
    ({'email': 'bob@example.com'}, 'email'),
])
def test_invalid_settings(auth_client, gardener, other_gardener, data, field):
    response = auth_client.put(f'/api/users/{gardener.id}', data, format='json')

    assert response.status_code == 400
    assert field in response.data['details']


def test_invalid_flow_rate_message(auth_client, gardener):
    response = auth_client.put(f'/api/users/{gardener.id}', {'flowRate': -1}, format='json')

    assert response.data['details']['flowRate'] == ['Please enter a valid flow rate.']
