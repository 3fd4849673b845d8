"""
HTTP Helpers
"""
from sessioncookie.http.response_helper import ResponseHelper

__all__ = [
    'ResponseHelper',
]
