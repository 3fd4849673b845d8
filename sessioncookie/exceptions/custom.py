"""
Custom Exception Classes
Framework-specific exceptions with HTTP status codes
"""
from typing import Optional


class FrameworkException(Exception):
    """Base exception for all framework exceptions"""
    status_code = 500
    message = "An error occurred"
    error_code: Optional[str] = None

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class ConfigurationException(FrameworkException):
    """
    Invalid or missing configuration

    Raised at startup, never while serving a request

    Example:
        raise ConfigurationException("SESSION_SECRETS is required")
    """
    message = "Invalid configuration"
    error_code = 'CONFIGURATION_ERROR'


class BadRequestException(FrameworkException):
    """
    Bad request exception

    Raised when request is malformed or invalid

    Example:
        raise BadRequestException("newText must be a string")
    """
    status_code = 400
    message = "Bad request"
    error_code = 'BAD_REQUEST'
