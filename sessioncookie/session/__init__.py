"""
Session Package
Signed cookie sessions for Sanic
"""
from sessioncookie.session.session import Session, JSONValue
from sessioncookie.session.cookie import SessionCookie
from sessioncookie.session.store import SessionStorage
from sessioncookie.session.stores import CookieSessionStore

__all__ = [
    'Session',
    'JSONValue',
    'SessionCookie',
    'SessionStorage',
    'CookieSessionStore',
]
