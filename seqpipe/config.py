"""
Pipeline Settings
=================

Process-wide knobs for seqpipe. The library installs no logging handlers
of its own; ``configure(enable_logging=True)`` is a shortcut for quick
debugging sessions.

Usage:
    >>> from seqpipe import configure
    >>> configure(materialize_warn_threshold=100_000)
"""

import logging
from dataclasses import dataclass, fields
from typing import Optional

from .errors import InvalidArgument

logger = logging.getLogger(__name__)


@dataclass
class PipelineSettings:
    """Runtime settings consulted by the combinators."""
    enable_logging: bool = False
    materialize_warn_threshold: Optional[int] = None


settings = PipelineSettings()


def configure(**kwargs) -> PipelineSettings:
    """Update the global settings in place and return them."""
    known = {f.name for f in fields(PipelineSettings)}
    unknown = sorted(set(kwargs) - known)
    if unknown:
        raise InvalidArgument(f"Unknown setting(s): {', '.join(unknown)}")

    threshold = kwargs.get('materialize_warn_threshold')
    if threshold is not None and threshold < 0:
        raise InvalidArgument(
            f"materialize_warn_threshold must be >= 0, got {threshold}"
        )

    for name, value in kwargs.items():
        setattr(settings, name, value)

    if settings.enable_logging:
        logging.basicConfig(level=logging.DEBUG)
    logger.debug("Settings updated: %s", settings)
    return settings
