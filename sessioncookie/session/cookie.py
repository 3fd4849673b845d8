"""
Session Cookie
Signed (optionally encrypted) cookie envelope built on Sanic's cookie helpers
"""
import json
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from cryptography.fernet import InvalidToken
from itsdangerous import BadData
from sanic.cookies.request import parse_cookie
from sanic.cookies.response import Cookie

from sessioncookie.logging import getLogger
from sessioncookie.support.config import SessionConfig
from sessioncookie.support.crypto import Crypto

logger = getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class SessionCookie:
    """
    Cookie envelope for session data

    The payload is an itsdangerous URL-safe timed token, signed with the
    newest configured secret and verified against all of them. When
    encryption is enabled the JSON is encrypted with Fernet first and the
    token carries the ciphertext.
    """

    def __init__(self, config: SessionConfig):
        self.config = config
        self.serializer = Crypto.create_serializer(config.secrets, config.salt)
        self.cipher = Crypto.create_cipher(config.secrets) if config.encrypt else None

    @property
    def name(self) -> str:
        return self.config.cookie_name

    @property
    def is_signed(self) -> bool:
        return bool(self.config.secrets)

    @property
    def expires(self) -> datetime:
        """Expiry date of a cookie serialized now"""
        return datetime.now(timezone.utc) + timedelta(seconds=self.config.max_age)

    # === Decoding ===

    def parse(self, cookie_header: Optional[str]) -> Optional[Any]:
        """
        Extract and decode this cookie from a Cookie header

        Args:
            cookie_header: Raw Cookie request header (may be None)

        Returns:
            Decoded value, or None when absent, expired or invalid
        """
        if not cookie_header:
            return None

        # Sanic keeps every value sent under a name, the first one wins
        values = parse_cookie(cookie_header).get(self.name)
        raw = values[0] if values else None
        if not raw:
            return None

        return self.decode(raw)

    def decode(self, raw: str) -> Optional[Any]:
        """Verify and decode a cookie value, None on any failure"""
        try:
            value = self.serializer.loads(raw, max_age=self.config.max_age)
            if self.cipher is not None:
                if not isinstance(value, str):
                    return None
                plaintext = self.cipher.decrypt(value.encode('ascii'), ttl=self.config.max_age)
                value = json.loads(plaintext)
            return value
        except BadData as e:
            # Covers bad signatures, expired timestamps and bad payloads
            logger.debug("Rejected session cookie: %s", e.__class__.__name__)
        except (InvalidToken, ValueError, UnicodeError) as e:
            logger.debug("Undecodable session cookie: %s", e.__class__.__name__)
        return None

    # === Encoding ===

    def encode(self, value: Any) -> str:
        """Sign (and encrypt, if enabled) a JSON value into a cookie value"""
        if self.cipher is not None:
            plaintext = json.dumps(value, sort_keys=True, separators=(',', ':'))
            value = self.cipher.encrypt(plaintext.encode('utf-8')).decode('ascii')
        return self.serializer.dumps(value)

    def serialize(self, value: Any, max_age: Optional[int] = None,
                  expires: Optional[datetime] = None) -> str:
        """
        Build a Set-Cookie header value

        Args:
            value: JSON value to store
            max_age: Override of the configured Max-Age
            expires: Override of the computed Expires date

        Returns:
            Set-Cookie header value
        """
        return self.format(self.encode(value), max_age=max_age, expires=expires)

    def format(self, encoded: str, max_age: Optional[int] = None,
               expires: Optional[datetime] = None) -> str:
        """Format an already encoded value with the cookie attributes"""
        if max_age is None:
            max_age = self.config.max_age
        if expires is None:
            expires = datetime.now(timezone.utc) + timedelta(seconds=max_age)

        cookie = Cookie(
            self.name,
            encoded,
            path=self.config.path,
            domain=self.config.domain,
            max_age=max_age,
            expires=expires,
            secure=self.config.secure,
            httponly=self.config.http_only,
            samesite=self.config.same_site,
        )
        return str(cookie)

    def clear(self) -> str:
        """Set-Cookie header value that removes the cookie"""
        return self.format('', max_age=0, expires=EPOCH)
