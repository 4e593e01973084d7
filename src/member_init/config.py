"""Initializer options and their environment-driven defaults.

Defaults can be overridden with environment variables:

- ``MEMBER_INIT_STRICT_MARKERS``: raise on duplicate / unknown markers
  instead of warning (default off)
- ``MEMBER_INIT_WARN_ORPHANS``: log a warning for duplicate / unknown
  markers (default on)

Unrecognized values fall back to the default with a warning.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_TRUE = ("1", "true", "yes", "on", "t")
_FALSE = ("0", "false", "no", "off", "f")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    raw = raw.strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    logger.warning("%s: expected a boolean, got %r; using %s", name, raw, default)
    return default


@dataclass(frozen=True)
class InitOptions:
    strict_markers: bool = False
    warn_orphans: bool = True


def default_options() -> InitOptions:
    """Options built from the environment, read on every call."""
    return InitOptions(
        strict_markers=_env_flag("MEMBER_INIT_STRICT_MARKERS", False),
        warn_orphans=_env_flag("MEMBER_INIT_WARN_ORPHANS", True),
    )
