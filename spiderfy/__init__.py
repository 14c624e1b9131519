from .params import (
    LayoutParameters,
    ParameterError,
    PARAMETER_ALIASES,
    get_default_parameters,
    set_default_parameters,
    parameters_from_mapping,
)
from .layout import (
    LayoutMode,
    LayoutRecord,
    SPIRAL_ANGLE_NUDGE,
    circle_radius,
    compute_layout,
    resolve_position,
    select_mode,
    transition_delay,
)
from .host import (
    EventHandlers,
    Placement,
    RELAYOUT_FIELDS,
    Spiderifier,
    UnknownEventError,
    needs_relayout,
)
from .diagnostics import (
    LayoutSummary,
    bounding_box,
    min_separation,
    normalize_positions,
    positions_array,
    summarize,
)
from .tikz_codegen import generate_tikz_code, generate_tikz_document, latex_escape

__all__ = [
    'LayoutParameters',
    'ParameterError',
    'PARAMETER_ALIASES',
    'get_default_parameters',
    'set_default_parameters',
    'parameters_from_mapping',
    'LayoutMode',
    'LayoutRecord',
    'SPIRAL_ANGLE_NUDGE',
    'circle_radius',
    'compute_layout',
    'resolve_position',
    'select_mode',
    'transition_delay',
    'EventHandlers',
    'Placement',
    'RELAYOUT_FIELDS',
    'Spiderifier',
    'UnknownEventError',
    'needs_relayout',
    'LayoutSummary',
    'bounding_box',
    'min_separation',
    'normalize_positions',
    'positions_array',
    'summarize',
    'generate_tikz_code',
    'generate_tikz_document',
    'latex_escape',
]
