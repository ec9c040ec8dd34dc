from django import template

register = template.Library()


@register.filter
def percentage_of(value, total):
    """
    Pourcentage de `value` par rapport à `total`, arrondi à une décimale.
    Usage: {{ choice.votes|percentage_of:total_votes }}
    """
    try:
        value = float(value)
        total = float(total)
    except (TypeError, ValueError):
        return 0.0
    if not total:
        return 0.0
    return round(value * 100.0 / total, 1)
