"""
WSGI config for mysite project.

Expose la callable WSGI sous le nom ``application``, utilisée par les
serveurs de production (gunicorn, mod_wsgi, ...).
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'mysite.settings')

application = get_wsgi_application()
