"""
EnvHelper - Read/Write .env files programmatically
"""

import os
import threading
from pathlib import Path
from typing import Optional, Any, List, Union
from dotenv import load_dotenv, set_key


class EnvHelper:
    """
    Environment variable manager with .env file read/write support

    Usage:
        # Read
        secrets = EnvHelper.get_list('SESSION_SECRETS')

        # Write
        EnvHelper.set('SESSION_SECRETS', 'new,old')

        # Load
        EnvHelper.load('/path/to/.env')
    """

    _lock = threading.Lock()
    _env_path: Optional[Path] = None
    _loaded: bool = False

    @classmethod
    def initialize(cls, env_path: Union[str, Path, None] = None):
        """
        Initialize EnvHelper

        Args:
            env_path: Path to .env file (defaults to .env in the working directory)
        """
        if env_path is None:
            env_path = Path.cwd() / '.env'

        cls._env_path = Path(env_path)
        cls._loaded = False

    @classmethod
    def load(cls, env_path: Union[str, Path, None] = None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (defaults to initialized path)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a .env file was read
        """
        with cls._lock:
            if env_path:
                cls._env_path = Path(env_path)

            if cls._env_path is None:
                cls._env_path = Path.cwd() / '.env'

            cls._loaded = True
            if not cls._env_path.exists():
                return False

            return load_dotenv(cls._env_path, override=override)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Args:
            key: Environment variable name
            default: Default value if not found

        Returns:
            Variable value or default
        """
        if not cls._loaded:
            cls.load()

        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """
        Get boolean environment variable

        Example:
            debug = EnvHelper.get_bool('APP_DEBUG', False)
        """
        value = cls.get(key)
        if value is None or value == '':
            return default

        return value.strip().lower() in ('true', '1', 'yes', 'on')

    @classmethod
    def get_int(cls, key: str, default: int = 0) -> int:
        """Get integer environment variable"""
        value = cls.get(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            return default

    @classmethod
    def get_list(cls, key: str, default: Optional[List[str]] = None, separator: str = ',') -> List[str]:
        """
        Get comma separated environment variable as a list

        Blank items are dropped, order is preserved.
        """
        value = cls.get(key)
        if value is None:
            return list(default or [])

        return [item.strip() for item in value.split(separator) if item.strip()]

    @classmethod
    def set(cls, key: str, value: Any, quote_mode: str = 'auto') -> bool:
        """
        Set environment variable and write to .env file

        Args:
            key: Environment variable name
            value: Value to set
            quote_mode: Quote mode ('auto', 'always', 'never')

        Returns:
            bool: True if set successfully
        """
        with cls._lock:
            if cls._env_path is None:
                cls._env_path = Path.cwd() / '.env'

            # Ensure .env file exists
            if not cls._env_path.exists():
                cls._env_path.touch()

            str_value = str(value) if not isinstance(value, str) else value

            result = set_key(str(cls._env_path), key, str_value, quote_mode=quote_mode)

            # Update current environment
            os.environ[key] = str_value

            return result[0] is True

    @classmethod
    def path(cls) -> Path:
        """Get .env file path"""
        if cls._env_path is None:
            cls.initialize()

        return cls._env_path
