"""
Centralized Error Handler
"""
import traceback
from typing import Any, Dict

from sanic import Request
from sanic.exceptions import SanicException

from sessioncookie.http.response_helper import ResponseHelper
from sessioncookie.logging import getLogger


class ErrorHandler:
    """
    Provides standardized JSON error responses and error reporting
    """
    def __init__(self, debug: bool = False, include_trace: bool = False):
        """
        Initialize error handler
        Args:
            debug: Enable debug mode (expose error details)
            include_trace: Include stack trace in error response (only in debug)
        """
        self.debug = debug
        self.include_trace = include_trace and debug
        self.logger = getLogger('sessioncookie.errors')

    async def handle_error(self, request: Request, error: Exception):
        """
        Handle error and return consistent JSON response
        """
        response_data = self._build_error_response(error, request)
        status_code = self._get_status_code(error)

        self._log_error(error, request, status_code)

        return ResponseHelper.error(
            message=response_data['error']['message'],
            status=status_code,
            code=response_data['error'].get('code'),
            debug=response_data.get('debug'),
        )

    def _build_error_response(self, error: Exception, request: Request) -> Dict[str, Any]:
        """
        Build standardized error response
        Returns:
            Error response dictionary
        """
        response: Dict[str, Any] = {
            'error': {
                'type': error.__class__.__name__,
                'message': self._get_error_message(error),
            }
        }

        if getattr(error, 'error_code', None):
            response['error']['code'] = error.error_code

        if self.debug:
            response['debug'] = {
                'type': error.__class__.__name__,
                'path': request.path,
                'method': request.method,
            }
            if self.include_trace:
                response['debug']['trace'] = traceback.format_exc().split('\n')

        return response

    def _get_error_message(self, error: Exception) -> str:
        """
        Get user-friendly error message
        """
        if isinstance(error, SanicException):
            return str(error)

        if hasattr(error, 'message'):
            return error.message

        # Don't expose internals outside debug
        if not self.debug:
            return "An error occurred while processing your request"

        return str(error)

    def _get_status_code(self, error: Exception) -> int:
        """
        Determine HTTP status code from error
        """
        if isinstance(error, SanicException):
            return error.status_code

        if hasattr(error, 'status_code'):
            return error.status_code

        return 500

    def _log_error(self, error: Exception, request: Request, status_code: int):
        """
        Log error with context
        """
        log_data = {
            'error_type': error.__class__.__name__,
            'error_message': str(error),
            'status_code': status_code,
            'method': request.method,
            'path': request.path,
        }

        if status_code >= 500:
            self.logger.error(
                f"{status_code} Error: {error.__class__.__name__}",
                extra=log_data,
                exc_info=error
            )
        elif status_code >= 400:
            self.logger.warning(
                f"{status_code} Error: {error.__class__.__name__}",
                extra=log_data
            )
        else:
            self.logger.info(f"{status_code} Response", extra=log_data)
