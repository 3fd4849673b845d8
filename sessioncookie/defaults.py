"""
Framework Default Values
All hardcoded values should be defined here and read through AppConfig / SessionConfig
These defaults can be overridden in .env or the process environment
"""

# ============================================================================
# APPLICATION DEFAULTS
# ============================================================================

DEFAULT_APP_NAME = 'sessioncookie'
DEFAULT_APP_ENV = 'local'

# ============================================================================
# NETWORK DEFAULTS
# ============================================================================

# Application Server
DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 8000

# ============================================================================
# SESSION DEFAULTS
# ============================================================================

DEFAULT_SESSION_LIFETIME = 3600  # seconds (1 hour)
DEFAULT_SESSION_COOKIE_NAME = 'sessioncookie_session'
DEFAULT_SESSION_COOKIE_PATH = '/'
DEFAULT_SESSION_SAME_SITE = 'Lax'
DEFAULT_SESSION_SALT = 'sessioncookie.session'
SESSION_SAME_SITE_VALUES = ('Lax', 'Strict', 'None')

# ============================================================================
# SECURITY DEFAULTS
# ============================================================================

DEFAULT_SECRET_LENGTH = 32  # bytes

# ============================================================================
# DEMO PAGE DEFAULTS
# ============================================================================

SECRET_DATA_TEXT = "This is some secret cookie data that was set when you visited the site!"
NO_SAVED_TEXT = "No text saved in cookie!"
SOURCE_URL = "https://github.com/chris31415926535/solidstart-sessioncookie-min-example"

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_FORMAT = 'json'
DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
