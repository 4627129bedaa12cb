"""Tests for contact submissions, CSV export and notifications."""

import smtplib
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from sap_training.extensions import mail
from sap_training.utils import notifications
from conftest import CONTACT, make_app


def test_contact_is_stored_and_listed(client):
    response = client.post('/api/contact', json=CONTACT)
    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is True
    assert body['contactId']

    listing = client.get('/api/admin/contacts').get_json()
    assert listing['success'] is True
    assert listing['count'] == 1
    stored = listing['data'][0]
    assert stored['id'] == body['contactId']
    assert stored['name'] == 'Asha Rao'
    assert stored['course'] == 'SAP FICO'
    assert stored['status'] == 'new'
    assert stored['timestamp']


def test_contact_defaults_for_optional_fields(client):
    payload = {k: CONTACT[k] for k in ('name', 'email', 'phone')}
    client.post('/api/contact', json=payload)
    stored = client.get('/api/admin/contacts').get_json()['data'][0]
    assert stored['course'] == 'Not specified'
    assert stored['message'] == ''


def test_contact_non_string_values_are_stored_as_text(client):
    payload = dict(CONTACT, course=101, message={'text': 'call me'})
    response = client.post('/api/contact', json=payload)
    assert response.status_code == 200
    stored = client.get('/api/admin/contacts').get_json()['data'][0]
    assert stored['course'] == '101'
    assert isinstance(stored['message'], str)
    assert 'call me' in stored['message']


def test_contact_accepts_form_encoded_body(client):
    response = client.post('/api/contact', data=CONTACT)
    assert response.status_code == 200
    assert client.get('/api/admin/contacts').get_json()['count'] == 1


@pytest.mark.parametrize('field', ['name', 'email', 'phone'])
def test_contact_missing_required_field(client, field):
    payload = dict(CONTACT)
    del payload[field]
    response = client.post('/api/contact', json=payload)
    assert response.status_code == 400
    body = response.get_json()
    assert body['success'] is False
    assert body['missing'] == [field]
    assert field in body['message']
    assert client.get('/api/admin/contacts').get_json()['count'] == 0


def test_contact_blank_fields_count_as_missing(client):
    response = client.post('/api/contact', json=dict(CONTACT, name='   ', phone=None))
    assert response.status_code == 400
    assert response.get_json()['missing'] == ['name', 'phone']


def test_contact_with_empty_body(client):
    response = client.post('/api/contact', json={})
    assert response.status_code == 400
    assert response.get_json()['missing'] == ['name', 'email', 'phone']


def test_contacts_listed_newest_first(client):
    client.post('/api/contact', json=dict(CONTACT, name='Older'))
    client.post('/api/contact', json=dict(CONTACT, name='Newer'))
    names = [c['name'] for c in client.get('/api/admin/contacts').get_json()['data']]
    assert names == ['Newer', 'Older']


def test_csv_export(client):
    for i in range(3):
        client.post('/api/contact', json=dict(CONTACT, name=f'Student {i}'))

    response = client.get('/api/admin/export/contacts')
    assert response.status_code == 200
    assert response.mimetype == 'text/csv'
    assert response.headers['Content-Disposition'] == 'attachment; filename=contacts.csv'

    lines = response.get_data(as_text=True).split('\n')
    assert len(lines) == 4
    assert lines[0] == 'ID,Name,Email,Phone,Course,Message,Timestamp,Status'

    contacts = client.get('/api/admin/contacts').get_json()['data']
    first = contacts[-1]
    assert first['name'] == 'Student 0'
    assert lines[1] == (
        f'{first["id"]},"{first["name"]}","asha@example.com","+91 90000 11111",'
        f'"SAP FICO","Please share the next batch dates",{first["timestamp"]},new'
    )


def test_csv_export_keeps_stored_order(client):
    for name in ('First', 'Second', 'Third'):
        client.post('/api/contact', json=dict(CONTACT, name=name))
    lines = client.get('/api/admin/export/contacts').get_data(as_text=True).split('\n')[1:]
    assert [line.split(',')[1] for line in lines] == ['"First"', '"Second"', '"Third"']


def test_csv_export_without_contacts(client):
    text = client.get('/api/admin/export/contacts').get_data(as_text=True)
    assert text.splitlines() == ['ID,Name,Email,Phone,Course,Message,Timestamp,Status']


@pytest.fixture
def mail_app(tmp_path):
    return make_app(tmp_path, MAIL_USERNAME='site@example.com',
                    MAIL_DEFAULT_SENDER='site@example.com',
                    NOTIFY_EMAIL='team@example.com')


def test_contact_sends_email_notification(mail_app):
    client = mail_app.test_client()
    with mail.record_messages() as outbox:
        response = client.post('/api/contact', json=CONTACT)

    assert response.status_code == 200
    assert len(outbox) == 1
    assert outbox[0].recipients == ['team@example.com']
    assert outbox[0].subject == 'New enquiry from Asha Rao'
    assert 'SAP FICO' in outbox[0].body


def test_email_failure_does_not_fail_request(mail_app, monkeypatch):
    def broken_send(message):
        raise smtplib.SMTPException('server unavailable')

    monkeypatch.setattr(mail, 'send', broken_send)
    client = mail_app.test_client()
    response = client.post('/api/contact', json=CONTACT)
    assert response.status_code == 200
    assert client.get('/api/admin/contacts').get_json()['count'] == 1


def test_no_email_without_mail_settings(client):
    with mail.record_messages() as outbox:
        client.post('/api/contact', json=CONTACT)
    assert outbox == []


def test_sns_notification(tmp_path, monkeypatch):
    sns = MagicMock()
    monkeypatch.setattr(notifications.boto3, 'client', lambda *args, **kwargs: sns)
    app = make_app(tmp_path, SNS_TOPIC_ARN='arn:aws:sns:ap-south-1:123456789012:contacts')

    response = app.test_client().post('/api/contact', json=CONTACT)

    assert response.status_code == 200
    sns.publish.assert_called_once()
    kwargs = sns.publish.call_args.kwargs
    assert kwargs['TopicArn'] == 'arn:aws:sns:ap-south-1:123456789012:contacts'
    assert 'Asha Rao' in kwargs['Message']


def test_sns_failure_is_swallowed(tmp_path, monkeypatch):
    sns = MagicMock()
    sns.publish.side_effect = ClientError({'Error': {'Code': 'AuthorizationError',
                                                     'Message': 'denied'}}, 'Publish')
    monkeypatch.setattr(notifications.boto3, 'client', lambda *args, **kwargs: sns)
    app = make_app(tmp_path, SNS_TOPIC_ARN='arn:aws:sns:ap-south-1:123456789012:contacts')

    response = app.test_client().post('/api/contact', json=CONTACT)
    assert response.status_code == 200
    assert response.get_json()['success'] is True


def test_contact_storage_failure_returns_server_error(client, app, monkeypatch):
    storage = app.extensions['storage']

    def broken_add(entity, record):
        raise OSError('disk full')

    monkeypatch.setattr(storage, 'add', broken_add)
    response = client.post('/api/contact', json=CONTACT)
    assert response.status_code == 500
    body = response.get_json()
    assert body['success'] is False
    assert 'disk full' not in body['message']
