"""
Theme - Centralized color and stroke definitions

Loads from active skin in tadpoles/gui/skins/
"""
from .skins import active as skin


def get(key, default='#ff00ff'):
    """Get value from active skin. Magenta = missing key."""
    return skin.SKIN.get(key, default)


FONT_FAMILY = get('font_family')
FONT_SIZE_STATUS = get('font_size_status')

COLORS = {
    'background': get('bg_canvas'),
    'status_bg': get('bg_status'),
    'tail': get('tail'),
    'head': get('head'),
    'guide_path': get('guide_path'),
    'guide_path_group': get('guide_path_group'),
    'selection': get('selection'),
    'text': get('text_normal'),
}

STROKES = {
    'tail': get('tail_width'),
    'head': get('head_width'),
    'guide_path': get('guide_path_width'),
    'selection_point_radius': get('selection_point_radius'),
}
