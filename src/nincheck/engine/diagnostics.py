"""
"Last failed step" for callers that only get a bool back.

The value lives in a ContextVar, so every thread and asyncio task sees the
result of its own most recent call. Prefer ``Outcome.failed_step`` where the
caller has the outcome at hand.
"""

from __future__ import annotations

from contextvars import ContextVar

_last_failed_step: ContextVar[str] = ContextVar("nincheck_last_failed_step", default="")


def record(failed_step: str) -> None:
    """Overwrite the step; an empty string means the last call succeeded."""
    _last_failed_step.set(failed_step)


def last_failed_step() -> str:
    return _last_failed_step.get()
