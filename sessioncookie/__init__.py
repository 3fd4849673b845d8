"""
sessioncookie
Signed cookie sessions on Sanic
"""
from sessioncookie.application import create_app
from sessioncookie.session import CookieSessionStore, Session, SessionCookie
from sessioncookie.support import AppConfig, SessionConfig

__version__ = '1.0.0'

__all__ = [
    'create_app',
    'AppConfig',
    'SessionConfig',
    'CookieSessionStore',
    'Session',
    'SessionCookie',
]
