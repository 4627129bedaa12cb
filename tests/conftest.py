import pytest

from sap_training import create_app
from sap_training.extensions import db
from sap_training.storage import get_storage


def make_app(tmp_path, backend='json', **overrides):
    settings = {
        'STORAGE_BACKEND': backend,
        'DATA_FOLDER': str(tmp_path / 'data'),
        'UPLOAD_FOLDER': str(tmp_path / 'uploads'),
    }
    settings.update(overrides)
    return create_app('testing', settings)


@pytest.fixture(params=['json', 'sql'])
def app(request, tmp_path):
    """App running against each storage backend in turn."""
    app = make_app(tmp_path, request.param)
    yield app
    if request.param == 'sql':
        with app.app_context():
            db.session.remove()
            db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def storage(app):
    with app.app_context():
        yield get_storage()


@pytest.fixture
def upload_folder(app):
    return app.config['UPLOAD_FOLDER']


CONTACT = {
    'name': 'Asha Rao',
    'email': 'asha@example.com',
    'phone': '+91 90000 11111',
    'course': 'SAP FICO',
    'message': 'Please share the next batch dates'
}

FEEDBACK = {
    'studentName': 'Ravi Teja',
    'studentEmail': 'ravi@example.com',
    'courseCompleted': 'SAP MM',
    'role': 'MM Consultant',
    'overallRating': 5,
    'instructorRating': 4,
    'contentRating': 5,
    'feedbackText': 'Clear explanations and useful project work.',
    'improvements': 'More mock interviews',
    'displayPublicly': True
}
