"""
Modèles de l'application `polls`.

Ce module définit:
- `Question`: l'énoncé d'un sondage et sa date de publication. Une question
  datée dans le futur n'est pas encore visible du public.
- `Choice`: une réponse possible à une question, avec son compteur de votes.

Les deux modèles sont exposés dans l'admin (voir `admin.py`) et leur schéma
est versionné par les migrations du dossier `migrations/`.
"""

import datetime

from django.contrib import admin
from django.db import models
from django.db.models import Sum
from django.utils import timezone


class QuestionQuerySet(models.QuerySet):
    """QuerySet des questions avec les filtres de visibilité."""

    def published(self):
        """Questions dont la date de publication est atteinte (pas de futur)."""
        return self.filter(pub_date__lte=timezone.now())


class Question(models.Model):
    """Question d'un sondage.

    Méthodes utilitaires:
    - `was_published_recently()`: publiée au cours des dernières 24 heures.
    - `is_published()`: la date de publication est passée.
    - `total_votes()`: somme des votes de tous les choix.
    """

    question_text = models.CharField(max_length=200)
    pub_date = models.DateTimeField('date published')

    objects = QuestionQuerySet.as_manager()

    class Meta:
        verbose_name = 'Question'
        verbose_name_plural = 'Questions'
        ordering = ('-pub_date',)

    def __str__(self):
        return self.question_text

    @admin.display(
        boolean=True,
        ordering='pub_date',
        description='Published recently?',
    )
    def was_published_recently(self):
        """Vrai si `pub_date` tombe dans les dernières 24 heures (futur exclu)."""
        now = timezone.now()
        return now - datetime.timedelta(days=1) <= self.pub_date <= now

    def is_published(self):
        return self.pub_date <= timezone.now()

    @admin.display(description='Votes')
    def total_votes(self):
        """Retourne le nombre total de votes, 0 si aucun choix."""
        return self.choice_set.aggregate(total=Sum('votes'))['total'] or 0


class Choice(models.Model):
    """Réponse possible à une `Question`.

    Supprimer la question supprime ses choix (CASCADE). Le compteur `votes`
    est protégé par une contrainte de base de données (jamais négatif).
    """

    # Question à laquelle ce choix répond
    question = models.ForeignKey(Question, on_delete=models.CASCADE)
    choice_text = models.CharField(max_length=200)
    votes = models.IntegerField(default=0)

    class Meta:
        verbose_name = 'Choix'
        verbose_name_plural = 'Choix'
        constraints = [
            models.CheckConstraint(
                condition=models.Q(votes__gte=0),
                name='polls_choice_votes_non_negative',
            ),
        ]

    def __str__(self):
        return self.choice_text

    def percentage(self, total=None):
        """Part des votes de la question portée par ce choix.

        Paramètres:
        - total (int|None): total déjà calculé, pour éviter une requête par choix.

        Retour:
        - float arrondi à une décimale, 0.0 si la question n'a aucun vote.
        """
        if total is None:
            total = self.question.total_votes()
        if not total:
            return 0.0
        return round(self.votes * 100.0 / total, 1)
