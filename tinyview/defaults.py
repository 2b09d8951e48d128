"""
Framework Default Values
All hardcoded values should be defined here and accessed via Config.get()
These defaults can be overridden in config/view.py or config/app.py
"""

# ============================================================================
# VIEW DEFAULTS
# ============================================================================

DEFAULT_VIEW_ENGINE = 'python'
DEFAULT_VIEW_ENCODING = 'utf-8'
DEFAULT_VIEW_TEMPLATE_DIR = None  # paths are used as given
DEFAULT_VIEW_LAYOUT = None

# Prefix of the event a helper call is dispatched through
DEFAULT_HELPER_EVENT_PREFIX = 'view.call.helper.'

# ============================================================================
# EVENT DEFAULTS
# ============================================================================

DEFAULT_EVENT_PRIORITY = 0

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_APP_ENV = 'local'
DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
