"""
Commande de gestion pour créer une question et ses choix.

Usage:
    python manage.py create_poll "What's new?" --choice "Not much" --choice "The sky"
    python manage.py create_poll "Bientôt" --choice A --choice B --days-offset 2
"""
import datetime

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from polls.models import Question


class Command(BaseCommand):
    help = 'Crée une question de sondage avec ses choix'

    def add_arguments(self, parser):
        parser.add_argument('question_text', help='Énoncé de la question')
        parser.add_argument(
            '--choice',
            action='append',
            dest='choices',
            default=[],
            help='Texte d\'un choix (répéter l\'option pour chaque choix)',
        )
        parser.add_argument(
            '--days-offset',
            type=int,
            default=0,
            help='Décalage en jours de la date de publication (négatif = passé)',
        )

    def handle(self, *args, **options):
        question_text = options['question_text'].strip()
        choices = [c.strip() for c in options['choices'] if c.strip()]

        if not question_text:
            raise CommandError("L'énoncé de la question est obligatoire")
        if len(choices) < 2:
            raise CommandError('Au moins deux choix sont nécessaires (--choice)')

        pub_date = timezone.now() + datetime.timedelta(days=options['days_offset'])

        with transaction.atomic():
            question = Question.objects.create(question_text=question_text, pub_date=pub_date)
            for text in choices:
                question.choice_set.create(choice_text=text, votes=0)

        self.stdout.write(
            self.style.SUCCESS(f'✓ Question #{question.pk} créée avec {len(choices)} choix')
        )
