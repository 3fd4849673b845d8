"""
Crypto - Centralized cryptography operations
Provides signed serializers, optional payload encryption and secret generation
"""
import base64
import hashlib
import secrets
from typing import Iterable, List

from cryptography.fernet import Fernet, MultiFernet
from itsdangerous import URLSafeTimedSerializer


class SecurityError(Exception):
    """Exception raised for security violations"""
    pass


class Crypto:
    """Centralized cryptography helper"""

    # === Signed Data (itsdangerous) ===

    @staticmethod
    def create_serializer(secret_keys: Iterable[str], salt: str) -> URLSafeTimedSerializer:
        """
        Create URL-safe timed serializer with key rotation

        Args:
            secret_keys: Secrets ordered newest first
            salt: Namespace for the signatures

        Returns:
            URLSafeTimedSerializer instance

        itsdangerous signs with the last key of the list and verifies with
        every key, so the list is reversed before it is handed over.
        """
        keys = list(secret_keys)
        if not keys:
            raise SecurityError("Cannot create a serializer without secret keys")

        return URLSafeTimedSerializer(
            list(reversed(keys)),
            salt=salt,
            serializer_kwargs={'sort_keys': True},
        )

    # === Encryption (cryptography / Fernet) ===

    @staticmethod
    def derive_fernet_key(secret: str) -> bytes:
        """
        Derive a Fernet key from an arbitrary secret string

        Args:
            secret: Secret string

        Returns:
            32 byte url-safe base64 encoded key
        """
        digest = hashlib.sha256(secret.encode('utf-8')).digest()
        return base64.urlsafe_b64encode(digest)

    @staticmethod
    def create_cipher(secret_keys: Iterable[str]) -> MultiFernet:
        """
        Create a rotation-aware cipher

        Args:
            secret_keys: Secrets ordered newest first

        Returns:
            MultiFernet encrypting with the first key and decrypting with any
        """
        keys: List[Fernet] = [Fernet(Crypto.derive_fernet_key(s)) for s in secret_keys]
        if not keys:
            raise SecurityError("Cannot create a cipher without secret keys")
        return MultiFernet(keys)

    # === Random Token Generation ===

    @staticmethod
    def generate_token(length: int = 32) -> str:
        """
        Generate URL-safe random token

        Args:
            length: Length of token in bytes (default: 32)

        Returns:
            URL-safe random string
        """
        return secrets.token_urlsafe(length)
