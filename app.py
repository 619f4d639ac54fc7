import logging
import streamlit as st
from domain.constants import LOG_LEVEL
from utils.log import setup_logging

# Import the page rendering functions from the view modules
from views import address_form

logger = logging.getLogger(__name__)

# --- Page Registry ---
# Maps a page key to its label and rendering function.
PAGE_REGISTRY = {
    "address_form": {
        "label": "📮 CEP lookup",
        "render_func": address_form.view,
    },
}

DEFAULT_PAGE = "address_form"


def main():
    """
    Main application entry point.

    Configures logging and the page, then renders the registered page. The app
    ships a single screen, so no navigation widget is shown.
    """
    setup_logging(LOG_LEVEL)
    st.set_page_config(page_title="CEP lookup", layout="centered")

    page = PAGE_REGISTRY[DEFAULT_PAGE]
    logger.debug("Rendering page %s", DEFAULT_PAGE)
    page["render_func"]()


if __name__ == "__main__":
    main()
