import html
import streamlit as st
from typing import Callable, Iterable, Tuple


def summary_card(rows: Iterable[Tuple[str, str]], on_close: Callable[[], None], key: str = "summary_close"):
    """
    Displays the confirmation card listing the submitted data, with a close button.
    """
    with st.container(border=True):
        st.markdown("<div class='summary-title'>Submitted data</div>", unsafe_allow_html=True)
        for label, value in rows:
            st.markdown(f"<div class='summary-row'><strong>{html.escape(label)}:</strong> {html.escape(value or '')}</div>",
                        unsafe_allow_html=True)
        st.button("Close", key=key, on_click=on_close, type="primary")
