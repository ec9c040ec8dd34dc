"""
Vues HTML de l'application `polls`.

Ce module contient :
- IndexView: les dernières questions publiées.
- DetailView: le formulaire de vote d'une question.
- ResultsView: le décompte des votes d'une question.
- vote: enregistre un vote puis redirige vers les résultats.

Les questions datées dans le futur ne sont jamais visibles: les vues de
détail et de résultats répondent 404 comme pour une question inexistante.
"""

import logging

from django.conf import settings
from django.db.models import F
from django.http import HttpResponseRedirect
from django.shortcuts import get_object_or_404, render
from django.urls import reverse
from django.views import generic
from django.views.decorators.http import require_POST

from .models import Choice, Question

logger = logging.getLogger(__name__)


class IndexView(generic.ListView):
    """Affiche les `POLLS_LATEST_COUNT` dernières questions publiées."""

    template_name = 'polls/index.html'
    context_object_name = 'latest_question_list'

    def get_queryset(self):
        count = getattr(settings, 'POLLS_LATEST_COUNT', 5)
        return Question.objects.published().order_by('-pub_date')[:count]


class DetailView(generic.DetailView):
    model = Question
    template_name = 'polls/detail.html'

    def get_queryset(self):
        """Exclut les questions pas encore publiées (404)."""
        return Question.objects.published()


class ResultsView(generic.DetailView):
    model = Question
    template_name = 'polls/results.html'

    def get_queryset(self):
        return Question.objects.published()

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        # Total calculé une seule fois pour tous les pourcentages du template
        context['total_votes'] = self.object.total_votes()
        return context


@require_POST
def vote(request, question_id):
    """Incrémente le choix sélectionné de la question `question_id`.

    - Question inconnue ou non publiée: Http404.
    - Aucun choix valide dans le POST: le formulaire est ré-affiché avec
      un message d'erreur.
    - Sinon: redirection vers la page de résultats (évite le double vote
      sur rechargement de la page).
    """
    question = get_object_or_404(Question.objects.published(), pk=question_id)
    try:
        selected_choice = question.choice_set.get(pk=request.POST['choice'])
    except (KeyError, ValueError, Choice.DoesNotExist):
        logger.info(f"Vote rejeté pour la question {question.pk}: aucun choix valide")
        return render(
            request,
            'polls/detail.html',
            {
                'question': question,
                'error_message': "You didn't select a choice.",
            },
        )

    # Incrément réalisé par la base de données pour éviter les votes perdus
    selected_choice.votes = F('votes') + 1
    selected_choice.save(update_fields=['votes'])
    logger.debug(f"Vote enregistré: question={question.pk} choix={selected_choice.pk}")

    return HttpResponseRedirect(reverse('polls:results', args=(question.id,)))
