"""Validation of result sheets and roster data.

Public API
----------
Models:
    ValidationIssue, CommitOutcome

Validators:
    ResultValidator, validate

Roster rules:
    is_name_taken, ensure_unique_name, validate_schedule
"""

from house_cup.validation.models import CommitOutcome, ValidationIssue
from house_cup.validation.results import ResultValidator, validate
from house_cup.validation.roster import (
    ensure_unique_name,
    is_name_taken,
    validate_schedule,
)

__all__ = [
    # Models
    "CommitOutcome",
    "ValidationIssue",
    # Validators
    "ResultValidator",
    "validate",
    # Roster rules
    "ensure_unique_name",
    "is_name_taken",
    "validate_schedule",
]
