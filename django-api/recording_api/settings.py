"""Django settings for the recording API.

Everything environment specific comes from recording_api.env.
"""

from pathlib import Path

from recording_api.env import get_settings

env = get_settings()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = env.secret_key
DEBUG = env.debug
ALLOWED_HOSTS = env.host_list

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "recording.apps.RecordingConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "recording_api.urls"
WSGI_APPLICATION = "recording_api.wsgi.application"
APPEND_SLASH = False

DATABASES = {"default": env.database()}
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True
TIME_ZONE = "UTC"
LANGUAGE_CODE = "en-us"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "recording.handlers.exceptions.recording_exception_handler",
}

# Recording behaviour
RECORDING_STORE_BACKEND = env.store_backend
RECORDING_ENFORCE_SESSION_EXISTS = env.enforce_session_exists
RECORDING_DEFAULT_PAGE_SIZE = env.default_page_size
RECORDING_MAX_PAGE_SIZE = env.max_page_size

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "recording": {
            "handlers": ["console"],
            "level": "DEBUG" if DEBUG else env.log_level,
        },
        "django": {
            "handlers": ["console"],
            "level": "INFO",
        },
    },
}
