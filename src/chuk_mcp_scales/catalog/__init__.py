"""
Scale catalog - CRUD over named scale definitions.

This module provides:
- ScaleCatalog: Lifecycle management and YAML persistence for scales
- ScaleValidator: Name and interval validation
- ScaleValidationError: Raised when a definition is rejected
"""

from chuk_mcp_scales.catalog.manager import ScaleCatalog
from chuk_mcp_scales.catalog.validator import (
    ScaleValidationError,
    ScaleValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    validate_scale,
)

__all__ = [
    "ScaleCatalog",
    "ScaleValidationError",
    "ScaleValidator",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "validate_scale",
]
