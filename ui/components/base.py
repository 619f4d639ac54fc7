import html
import streamlit as st
from typing import Optional

ERROR_RED = "#D32F2F"


def inject_base_css():
    """Emit the page stylesheet. Call once per script run, before any styled element."""
    st.markdown(
        f"""
        <style>
        .field-error {{
            color:{ERROR_RED}; font-size:13px; font-weight:500;
            margin-top:-0.4rem; margin-bottom:0.5rem;
        }}
        .summary-title {{font-size:22px; font-weight:700; color:#3A3A3A; margin-bottom:0.5rem;}}
        .summary-row {{font-size:16px; color:#4A4A4A; margin-bottom:4px;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def field_error(message: Optional[str]):
    """Render an inline validation message under a widget (no-op when None)."""
    if not message:
        return
    st.markdown(f"<div class='field-error'>{html.escape(message)}</div>", unsafe_allow_html=True)
