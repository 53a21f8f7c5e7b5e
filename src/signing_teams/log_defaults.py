"""
Library logging defaults.

Unconfigured structlog prints every event, debug included, to stdout. Used as a
library, signing_teams must not write into the caller's stdout, so importing the
package installs a quiet default when nothing is configured yet: events at
WARNING and above, handed to stdlib logging (stderr unless the application
routes it elsewhere).

An application that calls structlog.configure() itself, before or after the
import, keeps its own setup. The CLI does this in main.configure_structlog.
"""

from __future__ import annotations

import logging

import structlog


def install_default_logging() -> bool:
    """Install the quiet default; return False if structlog was already configured."""
    if structlog.is_configured():
        return False

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event", "level"]),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    return True
