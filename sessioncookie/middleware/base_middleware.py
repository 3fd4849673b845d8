"""
Base Middleware Class
Abstract base class for all middlewares
"""
from abc import ABC, abstractmethod

from sanic import Request, Sanic


class Middleware(ABC):
    """
    Base middleware class

    Middlewares can:
    - Inspect/modify requests before they reach routes
    - Inspect/modify responses before they're sent
    - Short-circuit requests (return response early)
    """

    def register(self, app: Sanic) -> None:
        """Attach both hooks to a Sanic application"""
        app.register_middleware(self.before_request, 'request')
        app.register_middleware(self.after_response, 'response')

    @abstractmethod
    async def before_request(self, request: Request):
        """
        Called before the request reaches the route handler

        Args:
            request: The Sanic request object

        Returns:
            None: Continue to next middleware/route
            HTTPResponse: Short-circuit and return response immediately
        """
        pass

    async def after_response(self, request: Request, response):
        """
        Called after the route handler, before sending response

        Args:
            request: The Sanic request object
            response: The response object

        Returns:
            response: Modified or original response
        """
        return response
