"""ASGI config for the vibejournal project."""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'vibejournal.settings')

application = get_asgi_application()
