"""
Configuration
Immutable application and session settings, built once at process start
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from sessioncookie import defaults
from sessioncookie.exceptions.custom import ConfigurationException
from sessioncookie.support.env_helper import EnvHelper


@dataclass(frozen=True)
class SessionConfig:
    """
    Session cookie settings

    Secrets are ordered newest first: the first secret signs new cookies,
    every secret is tried when verifying an incoming one.

    Usage:
        config = SessionConfig(secrets=('new-secret', 'old-secret'))
        config = SessionConfig.from_env()
    """

    secrets: Tuple[str, ...]
    cookie_name: str = defaults.DEFAULT_SESSION_COOKIE_NAME
    path: str = defaults.DEFAULT_SESSION_COOKIE_PATH
    domain: Optional[str] = None
    secure: bool = True
    http_only: bool = True
    same_site: str = defaults.DEFAULT_SESSION_SAME_SITE
    max_age: int = defaults.DEFAULT_SESSION_LIFETIME
    encrypt: bool = False
    salt: str = defaults.DEFAULT_SESSION_SALT

    def __post_init__(self):
        # A lone string is one secret, any other iterable is stored as a tuple
        secrets = (self.secrets,) if isinstance(self.secrets, str) else tuple(self.secrets or ())
        object.__setattr__(self, 'secrets', secrets)
        self._validate()

    def _validate(self):
        if not self.secrets or not all(isinstance(s, str) and s for s in self.secrets):
            raise ConfigurationException(
                "At least one non-empty session secret is required. "
                "Run: sessioncookie secret:generate --write"
            )

        if not self.cookie_name or any(c in self.cookie_name for c in ' ;,='):
            raise ConfigurationException(f"Invalid session cookie name: {self.cookie_name!r}")

        same_site = self.same_site.capitalize()
        if same_site not in defaults.SESSION_SAME_SITE_VALUES:
            raise ConfigurationException(
                f"Invalid SameSite value {self.same_site!r}, "
                f"expected one of {', '.join(defaults.SESSION_SAME_SITE_VALUES)}"
            )
        object.__setattr__(self, 'same_site', same_site)

        if same_site == 'None' and not self.secure:
            raise ConfigurationException("SameSite=None cookies must also be Secure")

        if self.max_age <= 0:
            raise ConfigurationException("Session lifetime must be a positive number of seconds")

    @classmethod
    def from_env(cls) -> 'SessionConfig':
        """Build session settings from the environment / .env file"""
        return cls(
            secrets=tuple(EnvHelper.get_list('SESSION_SECRETS')),
            cookie_name=EnvHelper.get('SESSION_COOKIE_NAME', defaults.DEFAULT_SESSION_COOKIE_NAME),
            path=EnvHelper.get('SESSION_COOKIE_PATH', defaults.DEFAULT_SESSION_COOKIE_PATH),
            domain=EnvHelper.get('SESSION_COOKIE_DOMAIN') or None,
            secure=EnvHelper.get_bool('SESSION_COOKIE_SECURE', True),
            http_only=EnvHelper.get_bool('SESSION_COOKIE_HTTP_ONLY', True),
            same_site=EnvHelper.get('SESSION_COOKIE_SAME_SITE', defaults.DEFAULT_SESSION_SAME_SITE),
            max_age=EnvHelper.get_int('SESSION_LIFETIME', defaults.DEFAULT_SESSION_LIFETIME),
            encrypt=EnvHelper.get_bool('SESSION_ENCRYPT', False),
        )

    def __repr__(self) -> str:
        # Never print the secrets themselves
        return (
            f"SessionConfig(cookie_name={self.cookie_name!r}, secrets=<{len(self.secrets)}>, "
            f"path={self.path!r}, same_site={self.same_site!r}, secure={self.secure}, "
            f"http_only={self.http_only}, max_age={self.max_age}, encrypt={self.encrypt})"
        )


@dataclass(frozen=True)
class AppConfig:
    """Application level settings"""

    session: SessionConfig
    name: str = defaults.DEFAULT_APP_NAME
    env: str = defaults.DEFAULT_APP_ENV
    debug: bool = False
    host: str = defaults.DEFAULT_HOST
    port: int = defaults.DEFAULT_PORT
    log_format: str = defaults.DEFAULT_LOG_FORMAT
    log_file: Optional[str] = field(default=None)

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Build application settings from the environment / .env file"""
        return cls(
            session=SessionConfig.from_env(),
            name=EnvHelper.get('APP_NAME', defaults.DEFAULT_APP_NAME),
            env=EnvHelper.get('APP_ENV', defaults.DEFAULT_APP_ENV),
            debug=EnvHelper.get_bool('APP_DEBUG', False),
            host=EnvHelper.get('APP_HOST', defaults.DEFAULT_HOST),
            port=EnvHelper.get_int('APP_PORT', defaults.DEFAULT_PORT),
            log_format=EnvHelper.get('LOG_FORMAT', defaults.DEFAULT_LOG_FORMAT),
            log_file=EnvHelper.get('LOG_FILE') or None,
        )
