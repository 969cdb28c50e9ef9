"""Validation outcome models.

- ValidationIssue: a single problem found in a provisional result sheet
- CommitOutcome: either the committed results or the issue that blocked them
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from house_cup.core.enums import ValidationCode
from house_cup.core.errors import (
    DuplicateParticipantError,
    EmptyAssignmentError,
    ResultValidationError,
    UnknownPlacementError,
)
from house_cup.core.models import EventResult

_ERRORS: dict[ValidationCode, type[ResultValidationError]] = {
    ValidationCode.EMPTY_ASSIGNMENT: EmptyAssignmentError,
    ValidationCode.DUPLICATE_PARTICIPANT: DuplicateParticipantError,
    ValidationCode.UNKNOWN_PLACEMENT: UnknownPlacementError,
}


class ValidationIssue(BaseModel):
    """A single validation problem."""

    code: ValidationCode
    message: str
    participant_id: str = ""
    placement: int | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def to_exception(self) -> ResultValidationError:
        error_cls = _ERRORS.get(self.code, ResultValidationError)
        return error_cls(
            self.message,
            participant_id=self.participant_id,
            placement=self.placement,
        )


class CommitOutcome(BaseModel):
    """Result of validating a provisional sheet.

    Exactly one of ``results`` (on success) or ``issue`` (on failure) is
    meaningful.  Hosts show ``issue.message`` to the operator inline.
    """

    results: tuple[EventResult, ...] = ()
    issue: ValidationIssue | None = None

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return self.issue is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> tuple[EventResult, ...]:
        """Return the committed results or raise the matching error."""
        if self.issue is not None:
            raise self.issue.to_exception()
        return self.results
