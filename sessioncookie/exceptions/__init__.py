"""
Exceptions Package
Centralized error handling and reporting
"""
from sessioncookie.exceptions.custom import (
    FrameworkException,
    ConfigurationException,
    BadRequestException,
)
from sessioncookie.exceptions.error_handler import ErrorHandler

__all__ = [
    # Error handling
    'ErrorHandler',

    # Custom exceptions
    'FrameworkException',
    'ConfigurationException',
    'BadRequestException',
]
