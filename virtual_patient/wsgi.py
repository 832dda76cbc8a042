"""
WSGI config for the virtual_patient project.

Exposes the WSGI callable as a module-level variable named ``application``.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "virtual_patient.settings")

application = get_wsgi_application()
