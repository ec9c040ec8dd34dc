"""
APIs JSON de l'application `polls`.

But:
- Exposer la liste des questions publiées et le résumé des résultats d'une
  question sous forme JSON.

Sorties:
- JsonResponse; erreurs au format {"detail": "..."} avec le code HTTP adapté.
"""
import logging

from django.core.cache import cache
from django.core.paginator import Paginator
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from .models import Question

logger = logging.getLogger(__name__)

RESULTS_CACHE_KEY = 'poll_results_{}'


def results_cache_key(question_id):
    return RESULTS_CACHE_KEY.format(question_id)


def build_results_summary(question):
    """Construit le résumé des résultats d'une question (sérialisable JSON)."""
    choices = list(question.choice_set.order_by('pk'))
    total = sum(choice.votes for choice in choices)
    return {
        'id': question.pk,
        'question_text': question.question_text,
        'pub_date': question.pub_date.isoformat(),
        'total_votes': total,
        'choices': [
            {
                'id': choice.pk,
                'choice_text': choice.choice_text,
                'votes': choice.votes,
                'percentage': choice.percentage(total),
            }
            for choice in choices
        ],
    }


def _parse_int(value, default):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _positive_int(value, default):
    """Entier strictement positif, sinon `default` (page=0 ou page=-1 inclus)."""
    number = _parse_int(value, default)
    return number if number >= 1 else default


@require_http_methods(["GET"])
def question_list(request):
    """
    Liste paginée des questions publiées, les plus récentes d'abord.

    Paramètres GET: `page` (défaut 1) et `page_size` (défaut 20, borné à 1..100).
    """
    page = _positive_int(request.GET.get('page'), 1)
    page_size = _parse_int(request.GET.get('page_size'), 20)
    page_size = max(1, min(page_size, 100))  # borner la taille de page

    questions = Question.objects.published().order_by('-pub_date')
    paginator = Paginator(questions, page_size)
    page_obj = paginator.get_page(page)

    return JsonResponse({
        'questions': [
            {
                'id': q.pk,
                'question_text': q.question_text,
                'pub_date': q.pub_date.isoformat(),
                'total_votes': q.total_votes(),
            }
            for q in page_obj.object_list
        ],
        'page': page_obj.number,
        'num_pages': paginator.num_pages,
        'count': paginator.count,
    })


@require_http_methods(["GET"])
def question_results(request, question_id):
    """
    Résultats d'une question publiée, mis en cache jusqu'au prochain vote.
    """
    key = results_cache_key(question_id)
    summary = cache.get(key)
    if summary is None:
        question = Question.objects.published().filter(pk=question_id).first()
        if question is None:
            return JsonResponse({'detail': 'Question not found'}, status=404)
        summary = build_results_summary(question)
        cache.set(key, summary)
        logger.debug(f"Résultats de la question {question_id} mis en cache")
    return JsonResponse(summary)
