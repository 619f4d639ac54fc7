"""
This package provides the reusable UI components for the Streamlit application.

It is organized into two modules:
- `base`: CSS injection and the inline field error message.
- `cards`: the confirmation summary card.

Import from here (`from ui.components import field_error`) rather than from the
individual modules.
"""

from .base import (
    inject_base_css,
    field_error,
)

from .cards import (
    summary_card,
)
