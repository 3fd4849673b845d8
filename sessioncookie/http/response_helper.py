"""
Response Helpers
Standardized response utilities for consistent JSON and HTML responses
"""
from typing import Any, Dict, Optional

from sanic import response as sanic_response
from sanic.response import HTTPResponse


class ResponseHelper:
    """
    Response helper for consistent JSON and HTML responses

    Example:
        # JSON body plus the new session cookie
        return ResponseHelper.with_cookie({'newCookie': cookie}, cookie)

        # Error response
        return ResponseHelper.error('newText is required', status=400, code='BAD_REQUEST')
    """

    @staticmethod
    def json(data: Any, status: int = 200, headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
        """Return a plain JSON response"""
        return sanic_response.json(data, status=status, headers=headers)

    @staticmethod
    def with_cookie(data: Any, set_cookie: str, status: int = 200) -> HTTPResponse:
        """
        Return JSON response carrying a Set-Cookie header

        Args:
            data: Response body
            set_cookie: Complete Set-Cookie header value
            status: HTTP status code

        Returns:
            HTTPResponse
        """
        return sanic_response.json(data, status=status, headers={'Set-Cookie': set_cookie})

    @staticmethod
    def html(body: str, status: int = 200) -> HTTPResponse:
        """Return HTML response"""
        return sanic_response.html(body, status=status)

    @staticmethod
    def error(
        message: str,
        status: int = 400,
        code: Optional[str] = None,
        debug: Optional[Dict[str, Any]] = None
    ) -> HTTPResponse:
        """
        Return error response

        Args:
            message: Error message
            status: HTTP status code
            code: Error code for client handling
            debug: Extra details, only set in debug mode

        Returns:
            HTTPResponse
        """
        body: Dict[str, Any] = {'success': False, 'message': message}
        if code:
            body['code'] = code
        if debug:
            body['debug'] = debug
        return sanic_response.json(body, status=status)
