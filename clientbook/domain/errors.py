"""
clientbook.domain.errors — Precondition violations surfaced to callers.

Malformed numbers never raise (they are coerced to zero at the boundary).
These are the only conditions the engine reports as errors.
"""

from __future__ import annotations

from typing import Any, Optional


class PrioritisationError(Exception):
    """Base class for every error raised by the prioritisation engine."""


class ClientNotInCohortError(PrioritisationError, LookupError):
    """Raised when a client is ranked against a cohort that does not contain it."""

    def __init__(self, client_id: Any, cohort_size: int):
        self.client_id = client_id
        self.cohort_size = cohort_size
        super().__init__(
            f"client {client_id!r} is not a member of the cohort "
            f"({cohort_size} clients)"
        )


class MissingPriorityError(PrioritisationError, ValueError):
    """Raised when statistics are requested for a member without a computed priority."""

    def __init__(
        self,
        index: int,
        client_id: Optional[Any] = None,
        reason: str = "has no computed priority",
    ):
        self.index = index
        self.client_id = client_id
        self.reason = reason
        who = f"client {client_id!r}" if client_id is not None else "cohort member"
        super().__init__(
            f"{who} at position {index} {reason}; "
            f"score the cohort before aggregating"
        )
