"""Tests for chat signup and chat messages."""

import pytest

from sap_training import chatbot
from sap_training.routes import chat

SIGNUP = {'name': 'Kiran', 'email': 'kiran@example.com', 'phone': '9000022222'}


def test_signup_new_user(client):
    response = client.post('/api/chat/signup', json=SIGNUP)
    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is True
    assert body['returning'] is False
    assert body['message'] == 'Registration successful!'
    assert body['userId']
    assert body['greeting'][0].startswith('Hello Kiran!')


def test_signup_twice_returns_same_user(client):
    first = client.post('/api/chat/signup', json=SIGNUP).get_json()
    second = client.post('/api/chat/signup', json=SIGNUP).get_json()

    assert second['userId'] == first['userId']
    assert first['returning'] is False
    assert second['returning'] is True
    assert second['message'] == 'Welcome back!'
    assert client.get('/api/admin/chat-users').get_json()['count'] == 1


def test_signup_email_match_ignores_case(client):
    first = client.post('/api/chat/signup', json=SIGNUP).get_json()
    second = client.post('/api/chat/signup',
                         json=dict(SIGNUP, email=' Kiran@Example.COM ')).get_json()
    assert second['userId'] == first['userId']
    assert second['returning'] is True


@pytest.mark.parametrize('field', ['name', 'email', 'phone'])
def test_signup_missing_field(client, field):
    payload = dict(SIGNUP)
    payload[field] = ''
    response = client.post('/api/chat/signup', json=payload)
    assert response.status_code == 400
    assert response.get_json()['missing'] == [field]
    assert client.get('/api/admin/chat-users').get_json()['count'] == 0


def test_message_is_saved_with_reply(client):
    user_info = dict(SIGNUP, id='abc')
    response = client.post('/api/chat/message', json={
        'userId': 'abc',
        'userInfo': user_info,
        'message': 'What are the fees?'
    })
    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is True
    assert body['message'] == 'Message saved'
    assert body['messageId']
    assert 'kiran@example.com' in body['reply']

    stored = client.get('/api/admin/chat-messages').get_json()['data'][0]
    assert stored['id'] == body['messageId']
    assert stored['userId'] == 'abc'
    assert stored['userInfo'] == user_info
    assert stored['message'] == 'What are the fees?'


def test_anonymous_message_defaults(client):
    body = client.post('/api/chat/message', json={'message': 'xyz 123'}).get_json()
    assert body['reply'] == chatbot.generate_reply('xyz 123')

    stored = client.get('/api/admin/chat-messages').get_json()['data'][0]
    assert stored['userId'] == 'anonymous'
    assert stored['userInfo'] == {}


def test_reply_uses_stored_profile_when_no_user_info(client):
    user_id = client.post('/api/chat/signup', json=SIGNUP).get_json()['userId']
    body = client.post('/api/chat/message', json={
        'userId': user_id,
        'message': 'Can I get a demo?'
    }).get_json()
    assert '9000022222' in body['reply']
    assert 'kiran@example.com' in body['reply']


def test_reply_uses_configured_contact_details(client, app):
    app.config['SUPPORT_PHONES'] = ['+91 12345 67890']
    body = client.post('/api/chat/message', json={'message': 'demo please'}).get_json()
    assert '+91 12345 67890' in body['reply']


def test_message_required(client):
    response = client.post('/api/chat/message', json={'userId': 'abc', 'message': ''})
    assert response.status_code == 400
    assert response.get_json()['missing'] == ['message']
    assert client.get('/api/admin/chat-messages').get_json()['count'] == 0


def test_numeric_message_is_stored_as_text(client):
    response = client.post('/api/chat/message', json={'message': 123})
    assert response.status_code == 200
    body = response.get_json()
    assert body['reply'] == chatbot.generate_reply('123')

    stored = client.get('/api/admin/chat-messages').get_json()['data'][0]
    assert stored['message'] == '123'


def test_reply_failure_saves_nothing(client, monkeypatch):
    def broken_reply(*args):
        raise RuntimeError('reply failed')

    monkeypatch.setattr(chat, 'generate_reply', broken_reply)
    response = client.post('/api/chat/message', json={'message': 'hello'})
    assert response.status_code == 500
    assert response.get_json()['success'] is False
    assert client.get('/api/admin/chat-messages').get_json()['count'] == 0
