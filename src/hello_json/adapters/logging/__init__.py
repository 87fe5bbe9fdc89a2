"""Logging adapter - lib_log_rich setup.

Contents:
    * :func:`.setup.init_logging` - Idempotent logging initialization
    * :func:`.setup.log_scope` - Job-scoped context binding
    * :func:`.setup.flush_logging` - Drain pending records
"""

from __future__ import annotations

from .setup import flush_logging, init_logging, log_scope

__all__ = ["flush_logging", "init_logging", "log_scope"]
