"""ASGI entry point for the recording API."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "recording_api.settings")

application = get_asgi_application()
