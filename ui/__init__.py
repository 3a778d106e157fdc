"""
ui/
---
Presentation layer.

    from ui import render_array, render_stack
    from ui import playback_controls, analytics_panel, …
"""

from ui.canvas import (
    CanvasConfig,
    legend,
    render_array,
    render_linked_list,
    render_queue,
    render_stack,
)

from ui.controls import (
    action_button,
    algorithm_info,
    algorithm_selector,
    analytics_panel,
    banner,
    create_session_form,
    dashboard_cards,
    dashboard_sessions,
    explanation_panel,
    field_error,
    history_panel,
    playback_controls,
    session_list,
    structure_stats,
    value_form,
)

from ui.templates import LAYOUT_TEMPLATE

__all__ = [
    "CanvasConfig",
    "LAYOUT_TEMPLATE",
    "action_button",
    "algorithm_info",
    "algorithm_selector",
    "analytics_panel",
    "banner",
    "create_session_form",
    "dashboard_cards",
    "dashboard_sessions",
    "explanation_panel",
    "field_error",
    "history_panel",
    "legend",
    "playback_controls",
    "render_array",
    "render_linked_list",
    "render_queue",
    "render_stack",
    "session_list",
    "structure_stats",
    "value_form",
]
