"""WSGI config for the vibejournal project."""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'vibejournal.settings')

application = get_wsgi_application()
