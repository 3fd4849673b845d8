"""
Session Storage Interface
Base class for session storage drivers
"""
from abc import ABC, abstractmethod
from typing import Optional

from sessioncookie.session.session import Session


class SessionStorage(ABC):
    """Base session storage interface"""

    @abstractmethod
    async def get_session(self, cookie_header: Optional[str] = None) -> Session:
        """
        Build the session for a request

        Args:
            cookie_header: Raw Cookie request header

        Returns:
            Session, empty when the cookie is missing or invalid
        """
        pass

    @abstractmethod
    async def commit_session(self, session: Session) -> str:
        """
        Persist session data

        Args:
            session: Session to persist

        Returns:
            Set-Cookie header value
        """
        pass

    @abstractmethod
    async def destroy_session(self, session: Session) -> str:
        """
        Delete session data

        Args:
            session: Session to delete

        Returns:
            Set-Cookie header value clearing the cookie
        """
        pass
