"""Logging setup.

The scene owns stdout, so log records go to a file when one is configured
and to stderr otherwise.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level_name: str = "WARNING", file_path: Optional[str] = None) -> None:
    """Configure root logging for the ``snowscape`` process."""
    level = getattr(logging, level_name.upper(), logging.WARNING)
    handler: logging.Handler
    if file_path:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
