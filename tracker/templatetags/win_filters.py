from django import template

from tracker.models import MAX_WIN_LENGTH

register = template.Library()

# Icon + label for each kind of win
CATEGORY_DISPLAY = {
    'work': ('💼', 'Work'),
    'personal': ('❤️', 'Personal'),
    'growth': ('📈', 'Growth'),
}


@register.filter
def category_icon(category):
    return CATEGORY_DISPLAY.get(category, ('✨', ''))[0]


@register.filter
def category_label(category):
    return CATEGORY_DISPLAY.get(category, ('', category))[1]


@register.filter
def char_count(value, limit=MAX_WIN_LENGTH):
    """
    Character counter under each win box, e.g. "12/280".
    """
    return f"{len(value or '')}/{limit}"
