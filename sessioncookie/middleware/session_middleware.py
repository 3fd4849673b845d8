"""
Session Middleware
Decodes the session cookie of every request
"""
from sanic import Request

from sessioncookie.middleware.base_middleware import Middleware
from sessioncookie.session.store import SessionStorage


class SessionMiddleware(Middleware):
    """
    Session middleware

    Attaches the decoded session to request.ctx.session. Handlers commit
    or destroy it themselves, so nothing happens after the response.
    """

    def __init__(self, store: SessionStorage):
        self.store = store

    async def before_request(self, request: Request):
        """Start session before request"""
        request.ctx.session = await self.store.get_session(request.headers.get('cookie'))
        return None
