from datetime import timedelta

import pytest
from django.utils import timezone

from woot_irrigation_backend.models import LogMessage
from woot_irrigation_backend.services import write_log_message

pytestmark = pytest.mark.django_db


def test_latest_log_messages(auth_client, gardener):
    now = timezone.now()
    for minutes_ago, level, message in [(2, 'INFO', 'Registered.'), (1, 'INFO', 'Plant added.'),
                                        (0, 'WARNING', 'Weather unavailable.')]:
        LogMessage.objects.create(logLevel=level, message=message, relatedResourceId=gardener.id,
                                  createdAt=now - timedelta(minutes=minutes_ago))

    response = auth_client.get(f'/api/log_messages/{gardener.id}?amount=2')

    assert response.status_code == 200
    assert [entry['message'] for entry in response.data] == ['Weather unavailable.', 'Plant added.']
    assert response.data[0]['logLevel'] == 'WARNING'


def test_log_messages_default_amount(auth_client, gardener):
    for i in range(25):
        write_log_message('INFO', f'Entry {i}', gardener.id)

    response = auth_client.get(f'/api/log_messages/{gardener.id}')

    assert len(response.data) == 20


def test_log_messages_of_other_resources_are_not_listed(auth_client, gardener, other_gardener):
    write_log_message('INFO', 'Not yours.', other_gardener.id)

    response = auth_client.get(f'/api/log_messages/{gardener.id}')

    assert 'Not yours.' not in [entry['message'] for entry in response.data]


def test_log_messages_of_others_are_forbidden(auth_client, other_gardener):
    assert auth_client.get(f'/api/log_messages/{other_gardener.id}').status_code == 403


def test_invalid_amount(auth_client, gardener):
    assert auth_client.get(f'/api/log_messages/{gardener.id}?amount=many').status_code == 400


def test_actions_are_logged_for_the_gardener(auth_client, gardener):
    auth_client.post(f'/api/users/{gardener.id}/plants', {'catalogId': '2'}, format='json')

    response = auth_client.get(f'/api/log_messages/{gardener.id}')

    assert any("Plant 'Basil' added" in entry['message'] for entry in response.data)
