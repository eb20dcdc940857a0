"""
Scale Validator - validates scale definitions before they enter the catalog.

Validates:
- At least one name, and no blank names
- At least one interval
- Interval offsets agree with their size/quality
- Duplicate names and non-ascending intervals (advisory)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chuk_mcp_scales.core.interval import (
    InvalidIntervalCombination,
    get_pitch_offset,
    get_semitone_offset,
)
from chuk_mcp_scales.models.scale import ScaleDefinition


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Rejected by the catalog
    WARNING = "warning"  # Accepted but probably wrong
    INFO = "info"  # Informational only


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.severity.value.upper()}]"
        location = f" at {self.location}" if self.location else ""
        return f"{prefix} {self.code}: {self.message}{location}"


class ValidationResult:
    """Result of validating a scale definition."""

    def __init__(self) -> None:
        self.issues: list[ValidationIssue] = []

    def add_error(self, code: str, message: str, location: str | None = None) -> None:
        """Add an error issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.ERROR, code, message, location))

    def add_warning(self, code: str, message: str, location: str | None = None) -> None:
        """Add a warning issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.WARNING, code, message, location))

    def add_info(self, code: str, message: str, location: str | None = None) -> None:
        """Add an info issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.INFO, code, message, location))

    @property
    def is_valid(self) -> bool:
        """Return True if no errors (warnings/info are OK)."""
        return not any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def __bool__(self) -> bool:
        """Boolean conversion returns is_valid."""
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(str(issue) for issue in self.issues)


class ScaleValidationError(ValueError):
    """Raised by the catalog when a scale definition has validation errors."""

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__("; ".join(issue.message for issue in result.errors))


class ScaleValidator:
    """Validates scale definitions."""

    def validate(self, scale: ScaleDefinition) -> ValidationResult:
        """
        Validate a scale definition.

        Args:
            scale: The scale to validate

        Returns:
            ValidationResult with any issues found
        """
        result = ValidationResult()

        self._validate_names(scale, result)
        self._validate_intervals(scale, result)

        return result

    def _validate_names(self, scale: ScaleDefinition, result: ValidationResult) -> None:
        """Validate scale names."""
        names = scale.metadata.names
        if not names:
            result.add_error(
                "NO_NAMES",
                "Scale must have at least one name",
                "metadata/names",
            )
            return

        seen: set[str] = set()
        for i, name in enumerate(names):
            if not name or not name.strip():
                result.add_error(
                    "BLANK_NAME",
                    "Scale names cannot be empty or whitespace",
                    f"metadata/names/{i}",
                )
                continue

            key = name.strip().lower()
            if key in seen:
                result.add_warning(
                    "DUPLICATE_NAME",
                    f"Duplicate scale name: {name}",
                    f"metadata/names/{i}",
                )
            seen.add(key)

    def _validate_intervals(self, scale: ScaleDefinition, result: ValidationResult) -> None:
        """Validate the interval list."""
        if not scale.intervals:
            result.add_error(
                "NO_INTERVALS",
                "Scale must have at least one interval",
                "intervals",
            )
            return

        for i, interval in enumerate(scale.intervals):
            try:
                expected_semitones = get_semitone_offset(interval.name, interval.quality)
            except InvalidIntervalCombination as e:
                result.add_error("INVALID_INTERVAL", str(e), f"intervals/{i}")
                continue

            # Compound intervals are fine as long as they are whole octaves away
            pitch_gap = interval.pitch_offset - get_pitch_offset(interval.name)
            semitone_gap = interval.semitone_offset - expected_semitones
            if pitch_gap % 7 != 0 or semitone_gap % 12 != 0:
                result.add_warning(
                    "OFFSET_MISMATCH",
                    f"Interval {interval} has offsets ({interval.pitch_offset}, "
                    f"{interval.semitone_offset}) that do not match its size and quality",
                    f"intervals/{i}",
                )

        semitones = [interval.semitone_offset for interval in scale.intervals]
        if any(later <= earlier for earlier, later in zip(semitones, semitones[1:])):
            result.add_info(
                "NOT_ASCENDING",
                "Intervals are not in strictly ascending order",
                "intervals",
            )


def validate_scale(scale: ScaleDefinition) -> ValidationResult:
    """
    Convenience function to validate a scale definition.

    Args:
        scale: The scale to validate

    Returns:
        ValidationResult with any issues found
    """
    validator = ScaleValidator()
    return validator.validate(scale)
