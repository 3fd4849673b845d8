"""
Application Factory
"""
import re
from typing import Optional

from sanic import Sanic

from sessioncookie.controllers import SessionController
from sessioncookie.exceptions import ErrorHandler
from sessioncookie.logging import LoggerConfig, ROOT_LOGGER_NAME, getLogger
from sessioncookie.middleware import SessionMiddleware
from sessioncookie.routing import create_blueprint
from sessioncookie.session import CookieSessionStore
from sessioncookie.support import AppConfig

logger = getLogger(__name__)


def sanic_app_name(name: str) -> str:
    """Turn a display name into a valid Sanic application name"""
    cleaned = re.sub(r'[^A-Za-z0-9_\-]+', '_', name.strip()).strip('_')
    if not cleaned or not cleaned[0].isalpha():
        cleaned = f"app_{cleaned}" if cleaned else 'app'
    return cleaned


def create_app(config: Optional[AppConfig] = None) -> Sanic:
    """
    Build the Sanic application

    Configuration is read once here (from the environment when not given)
    and shared read-only by every request.

    Args:
        config: Application settings

    Returns:
        Configured Sanic instance
    """
    if config is None:
        config = AppConfig.from_env()

    LoggerConfig.setup_logger(
        ROOT_LOGGER_NAME,
        app_env=config.env,
        app_debug=config.debug,
        format_type=config.log_format,
        log_file=config.log_file,
    )

    app = Sanic(sanic_app_name(config.name))
    # Our own middleware and health route replace sanic-ext
    app.config.AUTO_EXTEND = False
    app.config.HEALTH = False
    app.config.HEALTH_ENDPOINT = False

    store = CookieSessionStore(config.session)
    app.ctx.config = config
    app.ctx.session_store = store

    SessionMiddleware(store).register(app)

    error_handler = ErrorHandler(debug=config.debug, include_trace=config.debug)
    app.error_handler.add(Exception, error_handler.handle_error)

    app.blueprint(create_blueprint(SessionController(store)))

    logger.info("Application created", extra={'session': repr(config.session)})
    return app
