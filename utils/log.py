import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", format_string: Optional[str] = None) -> None:
    """Configure root logging once per process.

    Streamlit re-executes the script on every interaction; basicConfig is a
    no-op once handlers exist, so calling this from app.main() is safe.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=format_string or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger('urllib3').setLevel(logging.WARNING)
