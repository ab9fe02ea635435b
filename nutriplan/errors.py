# -*- coding: utf-8 -*-
"""Error taxonomy for nutrition targets and plan generation."""

from __future__ import annotations


class NutriplanError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(NutriplanError):
    """Caller supplied a profile the calculator cannot work with."""


class UpstreamUnavailable(NutriplanError):
    """The language model call itself failed (network, HTTP status, empty body)."""


class PlanValidationError(NutriplanError):
    """Model output could not be used as a plan.

    `reason` is a stable code suitable for logs and metrics.
    """

    reason = "invalid_plan"

    def __init__(self, message: str, *, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class MalformedResponse(PlanValidationError):
    reason = "malformed_response"


class InvalidShape(PlanValidationError):
    reason = "invalid_shape"


class EmptyPlan(PlanValidationError):
    reason = "empty_plan"


class MissingRequiredFields(PlanValidationError):
    reason = "missing_required_fields"
