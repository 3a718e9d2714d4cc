"""
Default Skin - Pink on white

Matches the classic tadpole look: round-capped pink strokes.
"""

SKIN = {
    # Backgrounds
    'bg_canvas': '#ffffff',
    'bg_status': '#f4f4f4',

    # Tadpoles
    'tail': '#ffc0cb',            # pink
    'tail_width': 5,
    'head': '#ffc0cb',
    'head_width': 4,

    # Guide path
    'guide_path': '#ffc0cb',
    'guide_path_width': 1,
    'guide_path_group': '#ff69b4',

    # Selection overlay (space bar)
    'selection': '#009dec',
    'selection_point_radius': 2,

    # Text
    'text_normal': '#505050',
    'font_family': 'Helvetica',
    'font_size_status': 10,
}
