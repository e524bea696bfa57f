"""UI component modules."""

from ui.components.auto_search import run_pending_auto_search
from ui.components.control_panel import render_control_panel
from ui.components.header import render_header
from ui.components.history import render_history
from ui.components.option_display import render_option_display
from ui.components.probability_table import render_probability_dialog

__all__ = [
    "render_header",
    "render_control_panel",
    "render_option_display",
    "render_history",
    "render_probability_dialog",
    "run_pending_auto_search",
]
