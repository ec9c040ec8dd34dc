"""
Tâches Celery pour l'application polls.

Ce module contient les tâches asynchrones liées aux sondages:
- Invalidation du cache des résultats après un vote
"""
import logging

from celery import shared_task
from django.core.cache import cache
from kombu.exceptions import OperationalError

from .api import results_cache_key

logger = logging.getLogger(__name__)


@shared_task
def invalidate_results_cache(question_id: int):
    """
    Supprime le résumé des résultats mis en cache pour une question.

    Args:
        question_id: ID de la question dont les résultats ont changé

    Returns:
        str: la clé de cache supprimée
    """
    key = results_cache_key(question_id)
    cache.delete(key)
    logger.debug(f"Cache des résultats invalidé pour la question {question_id}")
    return key


def schedule_invalidation(question_id):
    """Planifie l'invalidation via Celery, ou l'exécute sur place si le broker est injoignable."""
    try:
        invalidate_results_cache.delay(question_id)
    except OperationalError as exc:
        logger.warning(f"Broker Celery indisponible ({exc}), invalidation synchrone")
        invalidate_results_cache(question_id)
