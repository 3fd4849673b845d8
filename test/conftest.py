import logging
import os

import pytest
from sanic import Sanic

from sessioncookie import create_app
from sessioncookie.session import CookieSessionStore
from sessioncookie.support import AppConfig, EnvHelper, SessionConfig

# Each test builds its own app under the same name
Sanic.test_mode = True

SECRET = "test-secret-newest"
OLD_SECRET = "test-secret-older"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point EnvHelper at an empty .env and drop SESSION_/APP_/LOG_ variables"""
    for key in list(os.environ):
        if key.startswith(('SESSION_', 'APP_', 'LOG_')):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(EnvHelper, '_env_path', tmp_path / '.env')
    monkeypatch.setattr(EnvHelper, '_loaded', True)
    yield tmp_path / '.env'


@pytest.fixture
def cookie_pair():
    """name=value part of a Set-Cookie header, usable as a Cookie header"""
    def _cookie_pair(set_cookie: str) -> str:
        return set_cookie.split(';', 1)[0]
    return _cookie_pair


@pytest.fixture
def session_config():
    return SessionConfig(secrets=(SECRET, OLD_SECRET), secure=False)


@pytest.fixture
def store(session_config):
    return CookieSessionStore(session_config)


@pytest.fixture
def app(session_config):
    config = AppConfig(session=session_config, name='sessioncookie_test', env='testing')
    app = create_app(config)
    yield app
    logging.getLogger('sessioncookie').handlers.clear()
