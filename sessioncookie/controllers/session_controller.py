"""
Session Controller
Reads, updates and destroys the demo session cookie
"""
import json
from typing import Any, Dict, Optional

from sanic import Request

from sessioncookie.defaults import SECRET_DATA_TEXT
from sessioncookie.exceptions import BadRequestException
from sessioncookie.http import ResponseHelper
from sessioncookie.logging import getLogger
from sessioncookie.session import Session, SessionStorage
from sessioncookie.view import render_home

logger = getLogger(__name__)


class SessionController:

    def __init__(self, store: SessionStorage):
        self.store = store

    async def _session(self, request: Request) -> Session:
        # The middleware normally decoded it already
        session = getattr(request.ctx, 'session', None)
        if session is None:
            session = await self.store.get_session(request.headers.get('cookie'))
        return session

    # === Data ===

    @staticmethod
    def session_data(session: Session) -> Dict[str, Any]:
        """Saved text plus a JSON dump of the whole session"""
        return {
            'savedText': session.get('savedText'),
            'allCookieDataJson': json.dumps(session.data),
        }

    async def data(self, request: Request):
        session = await self._session(request)
        return ResponseHelper.json(self.session_data(session))

    async def home(self, request: Request):
        session = await self._session(request)
        data = self.session_data(session)
        return ResponseHelper.html(render_home(data['savedText'], data['allCookieDataJson']))

    # === Actions ===

    async def setup(self, request: Request):
        """
        Page load action

        Stores the secret data string and counts page loads.
        """
        logger.info("Page loaded: setting secret cookie data")
        session = await self._session(request)

        session.set('secretData', SECRET_DATA_TEXT)

        page_loads = session.get('pageLoads')
        if isinstance(page_loads, int) and not isinstance(page_loads, bool) and page_loads > 0:
            session.set('pageLoads', page_loads + 1)
        else:
            session.set('pageLoads', 1)

        new_cookie = await self.store.commit_session(session)
        return ResponseHelper.with_cookie({'newCookie': new_cookie}, new_cookie)

    async def update_text(self, request: Request):
        """Save user supplied text in the session"""
        new_text = self._read_new_text(request)
        session = await self._session(request)

        old_text = session.get('savedText')
        logger.debug("Old text: %s", old_text)
        logger.debug("New text: %s", new_text)

        session.set('savedText', new_text)

        new_cookie = await self.store.commit_session(session)
        return ResponseHelper.with_cookie({'newCookie': new_cookie}, new_cookie)

    async def destroy(self, request: Request):
        """Clear every session field"""
        session = await self._session(request)
        destroyed_cookie = await self.store.destroy_session(session)
        return ResponseHelper.with_cookie({'destroyedCookie': destroyed_cookie}, destroyed_cookie)

    @staticmethod
    def _read_new_text(request: Request) -> str:
        """Extract newText from a JSON or form body"""
        new_text: Optional[Any] = None

        if 'json' in (request.content_type or ''):
            payload = request.json
            if isinstance(payload, dict):
                new_text = payload.get('newText')
        elif request.form:
            new_text = request.form.get('newText')

        if not isinstance(new_text, str):
            raise BadRequestException("newText is required and must be a string")

        return new_text
