"""
Fixtures pytest pour l'app polls (simples et réutilisables).
- create_question: fabrique une question décalée de `days` jours par rapport à maintenant.
- question_with_choices: question publiée hier avec deux choix.
- future_question: question publiée dans 30 jours (invisible du public).
"""
import datetime

import pytest
from django.utils import timezone

from polls.models import Question


def make_question(question_text, days, choices=()):
    """Crée une question publiée `days` jours dans le futur (négatif = passé)."""
    time = timezone.now() + datetime.timedelta(days=days)
    question = Question.objects.create(question_text=question_text, pub_date=time)
    for text in choices:
        question.choice_set.create(choice_text=text)
    return question


@pytest.fixture
def create_question(db):
    return make_question


@pytest.fixture
def question_with_choices(db):
    return make_question("What's up?", days=-1, choices=['Not much', 'The sky'])


@pytest.fixture
def future_question(db):
    return make_question('Future question.', days=30, choices=['Later'])
