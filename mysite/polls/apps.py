"""
Configuration de l'application `polls` (AppConfig).

Déclare le nom lisible et connecte les signaux à l'initialisation.
"""

from django.apps import AppConfig


class PollsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'polls'
    verbose_name = 'Sondages'

    def ready(self):
        # Connecte les receivers d'invalidation du cache des résultats
        import polls.signals  # noqa: F401
        # Enregistre les vérifications système (cache partagé en production)
        import polls.checks  # noqa: F401
