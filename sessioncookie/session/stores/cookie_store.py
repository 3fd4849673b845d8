"""
Cookie Session Store
Stores session data in a signed cookie using itsdangerous
"""
from typing import Optional

from sessioncookie.logging import getLogger
from sessioncookie.session.cookie import SessionCookie
from sessioncookie.session.session import Session
from sessioncookie.session.store import SessionStorage
from sessioncookie.support.config import SessionConfig

logger = getLogger(__name__)


class CookieSessionStore(SessionStorage):
    """
    Cookie-based session storage

    The whole session lives in the cookie, so there is nothing to read or
    write server side. Invalid, expired or tampered cookies never raise:
    they yield an empty session.
    """

    def __init__(self, config: SessionConfig):
        """
        Initialize cookie session store

        Args:
            config: Immutable session settings
        """
        self.config = config
        self.cookie = SessionCookie(config)

    async def get_session(self, cookie_header: Optional[str] = None) -> Session:
        data = self.cookie.parse(cookie_header)

        if not isinstance(data, dict):
            if data is not None:
                logger.debug("Ignoring session cookie with %s payload", type(data).__name__)
            return Session()

        return Session(data)

    async def commit_session(self, session: Session) -> str:
        # session.data is a copy, the session itself is left untouched
        return self.cookie.serialize(session.data)

    async def destroy_session(self, session: Session) -> str:
        return self.cookie.clear()
