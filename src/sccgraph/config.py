"""sccgraph runtime configuration helpers."""

from __future__ import annotations

import logging
import os
from typing import Iterable

_TRAVERSAL_ENV = "SCCGRAPH_TRAVERSAL"
_CHECK_INVARIANTS_ENV = "SCCGRAPH_CHECK_INVARIANTS"
_LOG_LEVEL_ENV = "SCCGRAPH_LOG_LEVEL"

DEFAULT_TRAVERSAL = "iterative"
DEFAULT_LOG_LEVEL = "WARNING"
TRAVERSAL_CHOICES = ("iterative", "recursive")

LOGGER = logging.getLogger(__name__)


def _env_choice(env_name: str) -> str | None:
    value = os.getenv(env_name)
    if not value:
        return None
    return value.strip().lower() or None


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip().lower()
    if raw in {"", "0", "false", "no"}:
        return False
    if raw in {"1", "true", "yes"}:
        return True
    return default


def resolve_traversal(preferred: str | None = None) -> str:
    """Resolve the traversal strategy requested by argument/env, falling back to the default."""

    strategy = preferred or _env_choice(_TRAVERSAL_ENV) or DEFAULT_TRAVERSAL
    return strategy.strip().lower()


def check_invariants_enabled() -> bool:
    return _env_bool(_CHECK_INVARIANTS_ENV)


def resolve_log_level(preferred: str | None = None) -> int:
    name = (preferred or os.getenv(_LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{name}'.")
    return level


def configure_logging(preferred: str | None = None, *, handlers: Iterable[logging.Handler] | None = None) -> int:
    """Install a basic stderr handler at the resolved level and return that level."""

    level = resolve_log_level(preferred)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        handlers=list(handlers) if handlers is not None else None,
    )
    logging.getLogger("sccgraph").setLevel(level)
    LOGGER.debug("configure_logging level=%s env=%s", logging.getLevelName(level), os.getenv(_LOG_LEVEL_ENV))
    return level


__all__ = [
    "resolve_traversal",
    "check_invariants_enabled",
    "resolve_log_level",
    "configure_logging",
    "DEFAULT_TRAVERSAL",
    "TRAVERSAL_CHOICES",
    "_TRAVERSAL_ENV",
    "_CHECK_INVARIANTS_ENV",
    "_LOG_LEVEL_ENV",
]
