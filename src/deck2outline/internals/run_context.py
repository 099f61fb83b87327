"""Process-global execution context.

Two tracking IDs show up in the logs:
- session_id: one per process (a whole CLI invocation)
- parse_run_id: regenerated for every pipeline run
"""

from __future__ import annotations

import logging
import os
import threading
import uuid

_session_id: str | None = None
_parse_run_id: str | None = None

_session_lock = threading.Lock()
_run_lock = threading.Lock()

log = logging.getLogger("deck2outline")


# region get_session_id
def get_session_id() -> str:
    """
    Return the session ID, generating it on first use.

    The `DECK2OUTLINE_SESSION_ID` environment variable wins over a random id, so
    tests and CI jobs can get predictable log lines.
    """
    global _session_id

    if _session_id is None:
        with _session_lock:
            if _session_id is None:
                _session_id = (
                    os.environ.get("DECK2OUTLINE_SESSION_ID") or uuid.uuid4().hex[:8]
                )
    return _session_id


# endregion


# region start_parse_run
def start_parse_run() -> str:
    """Generate a fresh run ID for a new pipeline run and return it."""
    global _parse_run_id

    with _run_lock:
        _parse_run_id = uuid.uuid4().hex[:8]

    return _parse_run_id


# endregion


# region get_parse_run_id
def get_parse_run_id() -> str:
    """Return the current run ID, or "Unknown" when no run has been started."""
    if _parse_run_id is None:
        log.debug("No parse run started yet; call start_parse_run() first.")
        return "Unknown"
    return _parse_run_id


# endregion
