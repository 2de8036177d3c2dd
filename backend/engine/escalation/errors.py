"""Validation errors raised at the projection boundary."""

from __future__ import annotations


class ProjectionValidationError(ValueError):
    """Base class for rejected projection input."""


class EmptyLineItemsError(ProjectionValidationError):
    """No valid consumption line item was supplied."""


class InvalidHorizonError(ProjectionValidationError):
    """Horizon outside [0, 50] years or not a finite integer."""


class InvalidEscalationRateError(ProjectionValidationError):
    """Escalation rate outside [-50, 100] %, non-finite, or unresolved."""


class InvalidLineItemError(ProjectionValidationError):
    """Consumption or unit price non-finite or out of range."""
