"""
Session Stores
"""
from sessioncookie.session.stores.cookie_store import CookieSessionStore

__all__ = [
    'CookieSessionStore',
]
