"""
Controllers
"""
from sessioncookie.controllers.session_controller import SessionController

__all__ = [
    'SessionController',
]
