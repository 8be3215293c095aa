#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Helpers for reading bot settings from environment variables."""

from __future__ import annotations

import logging
import os
from datetime import timezone, tzinfo

from .datetime_utils import ZoneNotFound, resolve_zone

log = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env(name: str) -> str:
    return (os.getenv(name) or "").strip()


def resolve_command_prefix(default: str = "!") -> str:
    return _env("COMMAND_PREFIX") or default


def resolve_default_timezone(default: tzinfo = timezone.utc) -> tzinfo:
    """Zone used for members who have not picked one."""
    raw = _env("DEFAULT_TIMEZONE")
    if not raw:
        return default
    try:
        return resolve_zone(raw)
    except ZoneNotFound:
        log.warning("DEFAULT_TIMEZONE=%s ignoré: fuseau inconnu, utilisation de %s", raw, default)
        return default


def resolve_nudge_to_past(default: bool = True) -> bool:
    raw = _env("NUDGE_TO_PAST").lower()
    if not raw:
        return default
    if raw in TRUE_VALUES:
        return True
    if raw in FALSE_VALUES:
        return False
    log.warning(
        "NUDGE_TO_PAST=%s ignoré. Valeurs acceptées: %s",
        raw,
        ", ".join(sorted(TRUE_VALUES | FALSE_VALUES)),
    )
    return default


def resolve_log_level(default: str = "INFO") -> int:
    raw = _env("LOG_LEVEL").upper()
    if raw and raw not in LOG_LEVELS:
        log.warning("LOG_LEVEL=%s ignoré. Valeurs acceptées: %s", raw, ", ".join(sorted(LOG_LEVELS)))
        raw = ""
    return getattr(logging, raw or default)
