"""
Routage de l'application `polls`.

Chaque entrée précise la vue appelée, les méthodes HTTP attendues et le type
de réponse (HTML/JSON/redirect/fichier).
"""

from django.urls import path

from . import api, exports, views

app_name = 'polls'

urlpatterns = [
    # GET /polls/: dernières questions publiées (HTML)
    path('', views.IndexView.as_view(), name='index'),
    # GET /polls/5/: formulaire de vote, 404 si inconnue ou future (HTML)
    path('<int:pk>/', views.DetailView.as_view(), name='detail'),
    # GET /polls/5/results/: décompte des votes (HTML)
    path('<int:pk>/results/', views.ResultsView.as_view(), name='results'),
    # POST /polls/5/vote/: enregistre le vote puis redirige vers les résultats
    path('<int:question_id>/vote/', views.vote, name='vote'),

    # API JSON (GET uniquement)
    path('api/questions/', api.question_list, name='api_question_list'),
    path('api/<int:question_id>/results/', api.question_results, name='api_question_results'),

    # GET /polls/export/: classeur Excel des résultats (staff)
    path('export/', exports.export_results, name='export_results'),
]
