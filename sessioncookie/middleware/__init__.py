"""
Middleware Package
"""
from sessioncookie.middleware.base_middleware import Middleware
from sessioncookie.middleware.session_middleware import SessionMiddleware

__all__ = [
    'Middleware',
    'SessionMiddleware',
]
