"""
Routing
"""
from sessioncookie.routing.routes import create_blueprint

__all__ = [
    'create_blueprint',
]
