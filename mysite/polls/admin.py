"""
Admin Django pour l'application `polls`.

- Les questions s'éditent avec leurs choix en ligne (ChoiceInline).
- Deux actions de masse: export Excel des résultats et remise à zéro des votes.
"""

import logging

from django.contrib import admin, messages
from django.utils import timezone

from .exports import build_results_workbook, workbook_response
from .models import Choice, Question

logger = logging.getLogger(__name__)


class ChoiceInline(admin.TabularInline):
    model = Choice
    extra = 3


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    """Administration des questions avec leurs choix."""

    fieldsets = [
        (None, {'fields': ['question_text']}),
        ('Date information', {'fields': ['pub_date'], 'classes': ['collapse']}),
    ]
    inlines = [ChoiceInline]
    list_display = ['question_text', 'pub_date', 'was_published_recently', 'total_votes']
    list_filter = ['pub_date']
    search_fields = ['question_text']
    date_hierarchy = 'pub_date'
    actions = ['export_results_xlsx', 'reset_votes']

    @admin.action(description='Exporter les résultats (Excel)')
    def export_results_xlsx(self, request, queryset):
        """Télécharge un classeur des résultats des questions sélectionnées"""
        wb = build_results_workbook(queryset.order_by('-pub_date'))
        filename = f"poll_results_{timezone.now():%Y%m%d_%H%M}.xlsx"
        logger.info(f"Export admin des résultats par {request.user}: {queryset.count()} question(s)")
        return workbook_response(wb, filename)

    @admin.action(description='Remettre les votes à zéro')
    def reset_votes(self, request, queryset):
        """Remet à zéro tous les choix des questions sélectionnées"""
        # save() par choix pour déclencher l'invalidation du cache des résultats
        choices = Choice.objects.filter(question__in=queryset).exclude(votes=0)
        reset_count = 0
        for choice in choices:
            choice.votes = 0
            choice.save(update_fields=['votes'])
            reset_count += 1
        self.message_user(
            request,
            f"{reset_count} choix remis à zéro.",
            messages.SUCCESS,
        )


@admin.register(Choice)
class ChoiceAdmin(admin.ModelAdmin):
    list_display = ['choice_text', 'question', 'votes']
    list_filter = ['question']
    search_fields = ['choice_text', 'question__question_text']
    list_select_related = ['question']
