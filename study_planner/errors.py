"""
Exception types raised by the study planner.

Validation errors subclass ``ValueError`` so callers that only care about
bad input can catch that; upstream failures subclass ``RuntimeError`` the
same way the service wrappers have always reported HTTP problems.
"""
from __future__ import annotations

import typing as t


class PlannerError(Exception):
    """Base class for all study planner errors."""


class InvalidDateRangeError(PlannerError, ValueError):
    """A date failed to parse, or the range is reversed or too long."""


class InvalidWeekdayError(PlannerError, ValueError):
    """A weekday selection contained a name outside SUNDAY..SATURDAY."""


class EmptyWeekdaySelectionError(PlannerError, ValueError):
    """A recurring schedule would create nothing and was not submitted."""


class UpstreamServiceError(PlannerError, RuntimeError):
    """The planner backend or the optimizer failed to answer properly."""

    def __init__(self, message: str, status_code: t.Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
