"""
Q&A Questions — Logging Configuration
======================================

What:  Configures the root logger for the whole package.
How:   logging.basicConfig with a consistent format and the level taken
       from settings.log_level; noisy third-party loggers are lowered.
When:  Called once by the embedding application (or a script) at startup.
"""

import logging
import sys

from qa.config import settings


def setup_logging() -> None:
    """
    Configure logging with a consistent format across all modules.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing logging config
    )

    # SQL statements are only echoed when log_level is DEBUG (see qa.database)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
