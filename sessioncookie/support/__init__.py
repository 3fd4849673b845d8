"""
Support Classes
"""

from sessioncookie.support.env_helper import EnvHelper
from sessioncookie.support.config import AppConfig, SessionConfig
from sessioncookie.support.crypto import Crypto, SecurityError

__all__ = [
    'EnvHelper',
    'AppConfig',
    'SessionConfig',
    'Crypto',
    'SecurityError',
]
