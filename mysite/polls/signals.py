"""
Signaux Django pour l'application polls.

But:
- Invalider le résumé des résultats mis en cache dès qu'un choix ou une
  question change (vote, édition dans l'admin, suppression).
- Planifier l'invalidation après le commit de la transaction: une tâche
  exécutée avant le commit laisserait un lecteur remettre en cache l'ancien état.

Sorties:
- Aucune réponse: supprime la clé de cache correspondante (effet de bord).
"""
from functools import partial

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .models import Choice, Question
from .tasks import schedule_invalidation


@receiver([post_save, post_delete], sender=Choice)
def invalidate_results_on_choice_change(sender, instance, **kwargs):
    """Un vote ou une modification de choix rend le résumé obsolète."""
    if instance.question_id:
        transaction.on_commit(partial(schedule_invalidation, instance.question_id))


@receiver([post_save, post_delete], sender=Question)
def invalidate_results_on_question_change(sender, instance, **kwargs):
    """Le texte ou la date de publication figurent dans le résumé."""
    transaction.on_commit(partial(schedule_invalidation, instance.pk))
