"""
Export Excel des résultats de sondages.

Fournit:
- build_results_workbook(): classeur openpyxl, une ligne par choix.
- workbook_response(): enveloppe un classeur dans une réponse HTTP téléchargeable.
- export_results(): vue réservée au staff, exporte toutes les questions publiées.
"""

import logging
from io import BytesIO

from django.contrib.admin.views.decorators import staff_member_required
from django.http import HttpResponse
from django.utils import timezone
from django.views.decorators.http import require_http_methods
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from .models import Question

logger = logging.getLogger(__name__)

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

HEADERS = ['Question', 'Published', 'Choice', 'Votes', 'Percentage']


def build_results_workbook(questions):
    """Construit un classeur des résultats.

    Entrées:
    - questions: itérable de `Question`.

    Sorties:
    - Workbook avec une ligne d'en-tête puis une ligne par choix. Une question
      sans choix occupe une ligne avec des cellules de choix vides.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = 'Results'

    ws.append(HEADERS)
    header_fill = PatternFill(start_color='FFCC00', end_color='FFCC00', fill_type='solid')
    for cell in ws[1]:
        cell.font = Font(bold=True)
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal='center')

    for question in questions:
        # Les dates Excel ne supportent pas les fuseaux horaires
        published = timezone.localtime(question.pub_date).replace(tzinfo=None)
        choices = list(question.choice_set.order_by('pk'))
        if not choices:
            ws.append([question.question_text, published, None, None, None])
            continue
        total = sum(choice.votes for choice in choices)
        for choice in choices:
            ws.append([
                question.question_text,
                published,
                choice.choice_text,
                choice.votes,
                choice.percentage(total),
            ])

    for index, width in enumerate([50, 20, 40, 10, 12], start=1):
        ws.column_dimensions[get_column_letter(index)].width = width
    for cell in ws['B'][1:]:
        cell.number_format = 'yyyy-mm-dd hh:mm'

    return wb


def workbook_response(wb, filename):
    """Sérialise le classeur et le renvoie en pièce jointe."""
    buffer = BytesIO()
    wb.save(buffer)
    response = HttpResponse(buffer.getvalue(), content_type=XLSX_CONTENT_TYPE)
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response


@staff_member_required
@require_http_methods(["GET"])
def export_results(request):
    """Exporte les résultats de toutes les questions publiées."""
    questions = Question.objects.published().order_by('-pub_date')
    wb = build_results_workbook(questions)
    filename = f"poll_results_{timezone.now():%Y%m%d_%H%M}.xlsx"
    logger.info(f"Export des résultats par {request.user}: {questions.count()} question(s)")
    return workbook_response(wb, filename)
