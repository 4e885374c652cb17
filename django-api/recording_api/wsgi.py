"""WSGI entry point for the recording API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "recording_api.settings")

application = get_wsgi_application()
