"""Validation utilities for Swiss Round.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Optional

from swissround.constants import BYE_ID, RESULT_OVERWRITE_POLICIES
from swissround.exceptions import ValidationError


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"

    def raise_if_invalid(self) -> str:
        """Return the sanitized value, or raise ValidationError."""
        if not self.is_valid:
            raise ValidationError(self.error_message)
        return self.sanitized_value


# ========== Text Validation ==========


def validate_required_text(value: Optional[str], field_name: str) -> ValidationResult:
    """Validate a required, non-blank text field.

    Args:
        value: Text to validate
        field_name: Field label used in the error message

    Returns:
        ValidationResult with the stripped text

    Example:
        >>> validate_required_text("  Club Open ", "Title").sanitized_value
        'Club Open'
    """
    if value is None or not str(value).strip():
        return ValidationResult(
            is_valid=False,
            error_message=f"field must be filled: {field_name} is required",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(value).strip())


def validate_name(name: Optional[str]) -> ValidationResult:
    """Validate a competitor name."""
    return validate_required_text(name, "Name")


def validate_competitor_id(competitor_id: Optional[str]) -> ValidationResult:
    """Validate a competitor id: non-blank and not the reserved BYE sentinel."""
    result = validate_required_text(competitor_id, "Competitor id")
    if not result:
        return result
    if result.sanitized_value == BYE_ID:
        return ValidationResult(
            is_valid=False,
            error_message=f"Competitor id {BYE_ID!r} is reserved for byes",
        )
    return result


# ========== Configuration Validation ==========


def validate_bye_score(bye_score: float) -> None:
    """Raise ValidationError unless 0.0 <= bye_score <= 1.0."""
    if not (0.0 <= bye_score <= 1.0):
        raise ValidationError(
            f"Invalid bye score: {bye_score} (must be between 0.0 and 1.0)"
        )


def validate_overwrite_policy(policy: str) -> None:
    """Raise ValidationError for an unknown result overwrite policy."""
    if policy not in RESULT_OVERWRITE_POLICIES:
        raise ValidationError(
            f"Unknown result overwrite policy {policy!r}; "
            f"expected one of {', '.join(RESULT_OVERWRITE_POLICIES)}"
        )
