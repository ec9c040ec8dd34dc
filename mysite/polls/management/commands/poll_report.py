"""
Commande de gestion pour afficher les résultats des sondages publiés.

Usage:
    python manage.py poll_report
    python manage.py poll_report --id 3
"""
from django.core.management.base import BaseCommand, CommandError

from polls.models import Question


class Command(BaseCommand):
    help = 'Affiche les résultats des questions publiées'

    def add_arguments(self, parser):
        parser.add_argument('--id', type=int, dest='question_id', help='Limiter à une question')

    def handle(self, *args, **options):
        questions = Question.objects.published().order_by('-pub_date')
        if options['question_id'] is not None:
            questions = questions.filter(pk=options['question_id'])
            if not questions.exists():
                raise CommandError(f"Question {options['question_id']} introuvable ou non publiée")

        if not questions.exists():
            self.stdout.write(self.style.WARNING('Aucune question publiée'))
            return

        for question in questions:
            choices = list(question.choice_set.order_by('-votes', 'pk'))
            total = sum(choice.votes for choice in choices)
            self.stdout.write(self.style.MIGRATE_HEADING(f'#{question.pk} {question.question_text}'))
            for choice in choices:
                self.stdout.write(
                    f'  {choice.choice_text}: {choice.votes} ({choice.percentage(total)}%)'
                )
            self.stdout.write(f'  Total: {total}')
