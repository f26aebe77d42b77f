"""
WSGI config for the mailtrack project.

Served with gunicorn in production:
    gunicorn mailtrack.wsgi:application --bind 0.0.0.0:$PORT
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "mailtrack.settings")

application = get_wsgi_application()
