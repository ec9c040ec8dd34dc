"""
Application Celery du projet.

La configuration est lue depuis les settings Django (préfixe ``CELERY_``) et
les tâches sont découvertes automatiquement dans chaque app (``tasks.py``).
"""

import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'mysite.settings')

app = Celery('mysite')
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()
