"""Result validation before an event is committed as completed.

The validator only enforces the structural rules of a result sheet:

1. Unassigned placements (blank participant) are dropped; the rest have
   their participant ids trimmed.
2. At least one placement must remain.
3. A participant may hold at most one placement.

Eligibility (player category, house membership) is the host's concern at
selection time; unknown participant ids pass through and are skipped later
during aggregation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from house_cup.core.enums import ValidationCode
from house_cup.core.models import EventResult

from .models import CommitOutcome, ValidationIssue

logger = logging.getLogger(__name__)


class ResultValidator:
    """Turns a provisional result sheet into committed results."""

    def __init__(self, strict_placements: bool = False) -> None:
        self._strict_placements = strict_placements

    def validate(
        self,
        scoring: Mapping[int, int],
        provisional: Iterable[EventResult],
    ) -> CommitOutcome:
        """Validate *provisional* against the event's *scoring* schedule.

        Never raises for well-typed input; failures come back as an
        outcome carrying a ``ValidationIssue``.
        """
        # Committed ids are trimmed, so " P1" and "P1" are the same participant.
        assigned = [
            r.model_copy(update={"participant_id": r.participant_id.strip()})
            for r in provisional
            if r.is_assigned
        ]

        if not assigned:
            return self._reject(ValidationIssue(
                code=ValidationCode.EMPTY_ASSIGNMENT,
                message="At least one placement must be assigned",
            ))

        seen: set[str] = set()
        for result in assigned:
            if result.participant_id in seen:
                return self._reject(ValidationIssue(
                    code=ValidationCode.DUPLICATE_PARTICIPANT,
                    message="Each participant can only be assigned to one placement",
                    participant_id=result.participant_id,
                    placement=result.placement,
                ))
            seen.add(result.participant_id)

        if self._strict_placements:
            for result in assigned:
                if result.placement not in scoring:
                    return self._reject(ValidationIssue(
                        code=ValidationCode.UNKNOWN_PLACEMENT,
                        message=(
                            f"Placement {result.placement} is not part of "
                            "the scoring schedule"
                        ),
                        participant_id=result.participant_id,
                        placement=result.placement,
                        metadata={"schedule": sorted(scoring)},
                    ))

        return CommitOutcome(results=tuple(assigned))

    @staticmethod
    def _reject(issue: ValidationIssue) -> CommitOutcome:
        logger.info(
            "Result commit rejected: %s (participant=%s placement=%s)",
            issue.code.value,
            issue.participant_id or "-",
            issue.placement,
        )
        return CommitOutcome(issue=issue)


def validate(
    scoring: Mapping[int, int],
    provisional: Iterable[EventResult],
    *,
    strict_placements: bool = False,
) -> CommitOutcome:
    """Convenience wrapper around ``ResultValidator.validate``."""
    return ResultValidator(strict_placements=strict_placements).validate(
        scoring, provisional
    )
