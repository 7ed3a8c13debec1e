"""Best-effort persistence of raw API responses for diagnostics.

Layout under the configured trace directory::

    failed/2026-10-19_14-03-22_118204.json
    failed/2026-10-19_14-03-22_118204_msg.txt
    succeeded/2026-10-19_14-05-01_000731.json

INVARIANT: Trace writes never fail a call. Filesystem errors and text
that cannot be encoded as UTF-8 are logged and swallowed.
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import StrEnum
from pathlib import Path

from vkwire.config.models import TraceConfig

logger = logging.getLogger(__name__)

_STAMP_FORMAT = "%Y-%m-%d_%H-%M-%S_%f"
# Suffixes tried after the bare stamp before giving up on a trace.
_MAX_COLLISIONS = 100


class TraceOutcome(StrEnum):
    """Subdirectory a traced response is filed under."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


def _write(path: Path, text: str, what: str) -> bool:
    """Create *path* exclusively and write *text* into it.

    Raises:
        FileExistsError: *path* is taken; the caller picks another name.
    """
    try:
        data = text.encode("utf-8")
        with path.open("xb") as fh:
            fh.write(data)
    except FileExistsError:
        raise
    except (OSError, UnicodeEncodeError):
        logger.error("failed to write %s %s", what, path, exc_info=True)
        return False
    logger.debug("wrote %s into %s", what, path)
    return True


def write_trace(
    config: TraceConfig,
    outcome: TraceOutcome,
    text: str,
    message: str = "",
    *,
    now: datetime | None = None,
) -> Path | None:
    """Persist *text* (the raw response) under *outcome*.

    When *message* is non-empty it is written next to the response as
    ``<stamp>_msg.txt``. Existing traces are never overwritten: a taken
    stamp gets a ``-1``, ``-2``... suffix. Returns the response file
    path, or None if nothing could be written.
    """
    directory = config.trace_dir / outcome.value
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        logger.error("failed to create trace directory %s", directory, exc_info=True)
        return None

    stamp = (now or datetime.now()).strftime(_STAMP_FORMAT)
    for attempt in range(_MAX_COLLISIONS):
        stem = stamp if attempt == 0 else f"{stamp}-{attempt}"
        response_path = directory / f"{stem}.json"
        try:
            written = _write(response_path, text, "response")
        except FileExistsError:
            continue
        break
    else:
        logger.error("no free trace name for %s in %s", stamp, directory)
        return None

    if message:
        try:
            _write(directory / f"{stem}_msg.txt", message, "problem message")
        except FileExistsError:
            logger.error("problem message for %s already exists", response_path)
    return response_path if written else None


def trace_failed(config: TraceConfig, text: str, message: str) -> Path | None:
    """Trace a response whose payload failed to decode."""
    return write_trace(config, TraceOutcome.FAILED, text, message)


def trace_succeeded(config: TraceConfig, text: str) -> Path | None:
    """Trace a decoded response, only if the config opts into successes."""
    if not config.trace_all_successes:
        return None
    return write_trace(config, TraceOutcome.SUCCEEDED, text)
