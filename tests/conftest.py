import json
import time
from contextlib import contextmanager

import jwt
import pytest
import requests
from flask import session

from topup_admin import create_app
from topup_admin.config import Config
from topup_admin.popups.sessions import SESSION_KEY

ADMIN_EMAIL = 'hoyakap@gmail.com'
SECOND_ADMIN_EMAIL = 'erlanzh.gg@gmail.com'
ADMIN_POPUPS = 'admin-popups'
SECOND_ADMIN_POPUPS = 'second-admin-popups'
SIGNING_KEY = 'backend-signing-key-used-only-in-tests'


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    WTF_CSRF_ENABLED = False
    API_BASE_URL = 'http://backend.test/api'
    API_MAX_RETRIES = 0
    LOG_DIR = None
    LOG_LEVEL = 'WARNING'
    DISPLAY_TIMEZONE = 'UTC'


def make_token(identifier=ADMIN_EMAIL, role='admin', user_id=1, expires_in=3600):
    now = int(time.time())
    claims = {'id': user_id, 'identifier': identifier, 'role': role, 'iat': now, 'exp': now + expires_in}
    return jwt.encode(claims, SIGNING_KEY, algorithm='HS256')


def make_response(status=200, body=None, text=None, url=''):
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.encoding = 'utf-8'
    if body is not None:
        response._content = json.dumps(body).encode('utf-8')
        response.headers['Content-Type'] = 'application/json'
    elif text is not None:
        response._content = text.encode('utf-8')
    else:
        response._content = b''
    return response


class FakeBackend:
    """Stands in for requests.Session.request of the app's ApiClient."""

    def __init__(self, base_url):
        self.base_url = base_url
        self.routes = {}
        self.calls = []

    def add(self, method, path, status=200, body=None, text=None, error=None):
        """Queue a response; the last one queued for a route repeats."""
        self.routes.setdefault((method.upper(), path), []).append((status, body, text, error))
        return self

    def calls_to(self, method, path):
        return [call for call in self.calls if call['method'] == method.upper() and call['path'] == path]

    def __call__(self, method, url, headers=None, params=None, json=None, data=None, files=None, **_kwargs):
        path = url[len(self.base_url):]
        self.calls.append({
            'method': method.upper(), 'path': path, 'headers': headers or {},
            'params': params, 'json': json, 'data': data, 'files': files,
        })
        queue = self.routes.get((method.upper(), path))
        if not queue:
            return make_response(404, {'message': f'No route {method} {path}'}, url=url)
        status, body, text, error = queue.pop(0) if len(queue) > 1 else queue[0]
        if error is not None:
            raise error
        return make_response(status, body, text, url=url)


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
    app.extensions['popup_registries'].reset()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def backend(app, monkeypatch):
    fake = FakeBackend(app.config['API_BASE_URL'])
    monkeypatch.setattr(app.extensions['api_client'].session, 'request', fake)
    return fake


@pytest.fixture
def registry(app):
    """Popup registry of the session admin_client signs in with."""
    return app.extensions['popup_registries'].get(ADMIN_POPUPS)


@pytest.fixture
def second_registry(app):
    return app.extensions['popup_registries'].get(SECOND_ADMIN_POPUPS)


@contextmanager
def operator_request(app, popup_session=ADMIN_POPUPS):
    """Request context of a signed-in operator, for calling popup helpers directly."""
    with app.test_request_context():
        session[SESSION_KEY] = popup_session
        yield


def confirm_delete(client, entity_type, entity_id):
    """Press Delete in the confirmation popup rendered for the given entity."""
    return client.post('/popups/deleteConfirmation/confirm',
                       data={'entity_type': entity_type, 'entity_id': str(entity_id)})


def sign_in(client, identifier=ADMIN_EMAIL, token=None, refresh_token='refresh-token',
            popup_session=ADMIN_POPUPS):
    """Put a token pair into the client's session, as a successful login would."""
    with client.session_transaction() as sess:
        sess['access_token'] = token or make_token(identifier=identifier)
        sess['refresh_token'] = refresh_token
        sess['user_id'] = 1
        sess['user_identifier'] = identifier
        sess['user_role'] = 'admin'
        sess['_user_id'] = '1'
        sess['_fresh'] = True
        sess[SESSION_KEY] = popup_session


@pytest.fixture
def admin_client(client, backend):
    sign_in(client)
    return client


@pytest.fixture
def second_admin_client(app, backend):
    """Another administrator, signed in from a different browser."""
    other = app.test_client()
    sign_in(other, identifier=SECOND_ADMIN_EMAIL, popup_session=SECOND_ADMIN_POPUPS)
    return other
