"""
Vérifications système (``manage.py check``) de l'application polls.

En production les tâches Celery tournent dans un worker séparé: le cache des
résultats doit être partagé entre ce worker et les processus web, et le broker
doit être un vrai serveur. Sinon l'invalidation ne touche que le cache du
worker et les pages servent d'anciens résultats jusqu'à `CACHE_TIMEOUT`.
"""
from django.conf import settings
from django.core.checks import Tags, Warning, register

PROCESS_LOCAL_CACHES = (
    'django.core.cache.backends.locmem.LocMemCache',
    'django.core.cache.backends.dummy.DummyCache',
)


@register(Tags.caches)
def check_results_cache_invalidation(app_configs, **kwargs):
    """Signale une configuration où l'invalidation asynchrone serait sans effet."""
    if getattr(settings, 'DJANGO_ENV', 'development') != 'production':
        return []
    if getattr(settings, 'CELERY_TASK_ALWAYS_EAGER', False):
        return []

    errors = []
    backend = settings.CACHES.get('default', {}).get('BACKEND', '')
    if backend in PROCESS_LOCAL_CACHES:
        errors.append(Warning(
            'Le cache par défaut est local au processus alors que les tâches Celery ne sont pas eager.',
            hint='Définir CACHE_BACKEND sur un cache partagé (Redis, Memcached, base de données).',
            id='polls.W001',
        ))
    broker = getattr(settings, 'CELERY_BROKER_URL', '') or ''
    if broker.startswith('memory://'):
        errors.append(Warning(
            'CELERY_BROKER_URL pointe vers le transport en mémoire: aucun worker ne recevra les tâches.',
            hint='Définir CELERY_BROKER_URL sur un vrai broker (ex: redis://localhost:6379/0).',
            id='polls.W002',
        ))
    return errors
