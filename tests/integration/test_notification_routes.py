"""Tests for the notification endpoints"""

from datetime import timedelta

import pytest
from sqlalchemy.exc import OperationalError

from app.models.notification import Notification
from app.models.notification_repository import SqlAlchemyNotificationRepository


def test_get_notifications(client, post, add_notification):
    add_notification(type='like', age=timedelta(minutes=5))
    add_notification(actor_id=3, type='comment')

    response = client.get('/api/notifications/1')

    assert response.status_code == 200
    notifications = response.json['notifications']
    assert [n['type'] for n in notifications] == ['comment', 'like']
    assert notifications[0]['actor'] == {'_id': 3, 'username': 'carol'}
    assert notifications[0]['post']['title'] == 'Sunset at the pier'
    assert set(notifications[0]) == {'_id', 'type', 'isRead', 'createdAt', 'actor', 'post'}

def test_get_notifications_empty(client):
    response = client.get('/api/notifications/1')

    assert response.status_code == 200
    assert response.json == {'notifications': []}

def test_mark_as_read(client, add_notification):
    add_notification()
    notification_id = Notification.query.one().id

    response = client.put(f'/api/notifications/{notification_id}/read')

    assert response.status_code == 200
    assert response.json == {'message': 'Notification marked as read'}
    assert client.get('/api/notifications/1/unread-count').json == {'count': 0}

def test_mark_as_read_unknown_id_still_succeeds(client):
    response = client.put('/api/notifications/999/read')

    assert response.status_code == 200
    assert response.json == {'message': 'Notification marked as read'}

def test_mark_all_as_read(client, add_notification):
    add_notification(user_id=7, actor_id=1)
    add_notification(user_id=7, actor_id=2)
    assert client.get('/api/notifications/7/unread-count').json == {'count': 2}

    response = client.put('/api/notifications/user/7/read-all')

    assert response.status_code == 200
    assert response.json == {'message': 'All notifications marked as read'}
    assert client.get('/api/notifications/7/unread-count').json == {'count': 0}

def test_unread_count_for_unknown_user(client):
    response = client.get('/api/notifications/123/unread-count')

    assert response.status_code == 200
    assert response.json == {'count': 0}

@pytest.mark.parametrize('method, url, repository_method', [
    ('get', '/api/notifications/1', 'list_for_user'),
    ('put', '/api/notifications/1/read', 'mark_as_read'),
    ('put', '/api/notifications/user/1/read-all', 'mark_all_as_read'),
    ('get', '/api/notifications/1/unread-count', 'count_unread'),
])
def test_database_failure_returns_500(client, mocker, method, url, repository_method):
    """Any data access failure becomes a generic server error"""
    mocker.patch.object(
        SqlAlchemyNotificationRepository,
        repository_method,
        side_effect=OperationalError('SELECT', {}, Exception('connection lost'))
    )

    response = getattr(client, method)(url)

    assert response.status_code == 500
    assert response.json == {'message': 'Server Error', 'error': 'OperationalError'}

@pytest.mark.parametrize('method, url', [
    ('get', '/api/notifications/not-a-number'),
    ('put', '/api/notifications/abc/read'),
    ('put', '/api/notifications/user/abc/read-all'),
    ('get', '/api/notifications/not-a-number/unread-count'),
])
def test_malformed_id_returns_500(client, method, url):
    """Bad ids get the same generic server error as any other failure"""
    response = getattr(client, method)(url)

    assert response.status_code == 500
    assert response.json == {'message': 'Server Error', 'error': 'ValueError'}

def test_unknown_route_returns_json_404(client):
    response = client.get('/api/does-not-exist')

    assert response.status_code == 404
    assert 'message' in response.json
