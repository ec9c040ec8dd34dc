"""
Tests des vues HTML – explications simples:
- L'index ne montre que les questions publiées, 5 au maximum.
- Détail et résultats répondent 404 pour une question future ou inconnue.
- Le vote incrémente le choix et redirige; sans choix, le formulaire revient avec une erreur.
"""
import pytest
from django.urls import reverse

from polls.models import Choice


@pytest.mark.django_db
class TestIndexView:
    def test_no_questions(self, client):
        resp = client.get(reverse('polls:index'))
        assert resp.status_code == 200
        assert b'No polls are available.' in resp.content
        assert list(resp.context['latest_question_list']) == []

    def test_past_question(self, client, create_question):
        question = create_question('Past question.', days=-30)
        resp = client.get(reverse('polls:index'))
        assert list(resp.context['latest_question_list']) == [question]

    def test_future_question_hidden(self, client, create_question):
        create_question('Future question.', days=30)
        resp = client.get(reverse('polls:index'))
        assert b'No polls are available.' in resp.content
        assert list(resp.context['latest_question_list']) == []

    def test_future_and_past_question(self, client, create_question):
        question = create_question('Past question.', days=-30)
        create_question('Future question.', days=30)
        resp = client.get(reverse('polls:index'))
        assert list(resp.context['latest_question_list']) == [question]

    def test_two_past_questions_newest_first(self, client, create_question):
        question1 = create_question('Past question 1.', days=-30)
        question2 = create_question('Past question 2.', days=-5)
        resp = client.get(reverse('polls:index'))
        assert list(resp.context['latest_question_list']) == [question2, question1]

    def test_limited_to_latest_count(self, client, create_question, settings):
        settings.POLLS_LATEST_COUNT = 5
        for i in range(7):
            create_question(f'Question {i}', days=-(i + 1))
        resp = client.get(reverse('polls:index'))
        assert len(resp.context['latest_question_list']) == 5

    def test_root_redirects_to_index(self, client):
        resp = client.get('/')
        assert resp.status_code == 302
        assert resp['Location'] == reverse('polls:index')


@pytest.mark.django_db
class TestDetailView:
    def test_future_question_is_404(self, client, future_question):
        resp = client.get(reverse('polls:detail', args=(future_question.id,)))
        assert resp.status_code == 404

    def test_unknown_question_is_404(self, client):
        resp = client.get(reverse('polls:detail', args=(9999,)))
        assert resp.status_code == 404

    def test_past_question_shows_text_and_choices(self, client, question_with_choices):
        resp = client.get(reverse('polls:detail', args=(question_with_choices.id,)))
        assert resp.status_code == 200
        assert b'What&#x27;s up?' in resp.content
        assert b'Not much' in resp.content
        assert b'name="choice"' in resp.content


@pytest.mark.django_db
class TestResultsView:
    def test_future_question_is_404(self, client, future_question):
        resp = client.get(reverse('polls:results', args=(future_question.id,)))
        assert resp.status_code == 404

    def test_unknown_question_is_404(self, client):
        resp = client.get(reverse('polls:results', args=(9999,)))
        assert resp.status_code == 404

    def test_shows_vote_counts(self, client, question_with_choices):
        choice = question_with_choices.choice_set.get(choice_text='Not much')
        choice.votes = 2
        choice.save()
        resp = client.get(reverse('polls:results', args=(question_with_choices.id,)))
        assert resp.status_code == 200
        assert resp.context['total_votes'] == 2
        assert b'Not much -- 2 votes (100.0%)' in resp.content


@pytest.mark.django_db
class TestVoteView:
    def test_vote_increments_and_redirects(self, client, question_with_choices):
        choice = question_with_choices.choice_set.get(choice_text='The sky')
        url = reverse('polls:vote', args=(question_with_choices.id,))
        resp = client.post(url, {'choice': choice.id})
        assert resp.status_code == 302
        assert resp['Location'] == reverse('polls:results', args=(question_with_choices.id,))
        choice.refresh_from_db()
        assert choice.votes == 1

    def test_two_votes_accumulate(self, client, question_with_choices):
        choice = question_with_choices.choice_set.first()
        url = reverse('polls:vote', args=(question_with_choices.id,))
        client.post(url, {'choice': choice.id})
        client.post(url, {'choice': choice.id})
        choice.refresh_from_db()
        assert choice.votes == 2

    def test_missing_choice_redisplays_form(self, client, question_with_choices):
        url = reverse('polls:vote', args=(question_with_choices.id,))
        resp = client.post(url, {})
        assert resp.status_code == 200
        assert resp.context['error_message'] == "You didn't select a choice."
        assert b"You didn&#x27;t select a choice." in resp.content

    def test_choice_of_other_question_rejected(self, client, question_with_choices, create_question):
        other = create_question('Other?', days=-2, choices=['Elsewhere'])
        foreign_choice = other.choice_set.get()
        url = reverse('polls:vote', args=(question_with_choices.id,))
        resp = client.post(url, {'choice': foreign_choice.id})
        assert resp.status_code == 200
        assert 'error_message' in resp.context
        foreign_choice.refresh_from_db()
        assert foreign_choice.votes == 0

    def test_non_numeric_choice_rejected(self, client, question_with_choices):
        url = reverse('polls:vote', args=(question_with_choices.id,))
        resp = client.post(url, {'choice': 'abc'})
        assert resp.status_code == 200
        assert 'error_message' in resp.context
        assert Choice.objects.filter(votes__gt=0).count() == 0

    def test_vote_on_future_question_is_404(self, client, future_question):
        choice = future_question.choice_set.get()
        resp = client.post(reverse('polls:vote', args=(future_question.id,)), {'choice': choice.id})
        assert resp.status_code == 404

    def test_vote_on_unknown_question_is_404(self, client):
        resp = client.post(reverse('polls:vote', args=(9999,)), {'choice': 1})
        assert resp.status_code == 404

    def test_get_not_allowed(self, client, question_with_choices):
        resp = client.get(reverse('polls:vote', args=(question_with_choices.id,)))
        assert resp.status_code == 405
