"""Errors raised at the edges of the car query package.

Only record validation and request parsing can fail; the query functions are
total. Every error renders to a flat dict so outer layers (the summary report)
can show it without knowing the concrete class.
"""

from typing import Any


class DomainError(Exception):
    """Base class for car query errors.

    Attributes:
        message: What went wrong, in plain words
        context: Extra facts about the failure, e.g. ``index`` of a rejected car
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.error_code, **self.context}


class ValidationError(DomainError):
    """A car record or summary request broke a field rule.

    ``errors`` holds one entry per offending field, each with ``field``,
    ``message`` and usually ``code``:

        [{"field": "cost", "message": "Must be >= 0", "code": "NEGATIVE_COST"}]
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        self.errors: list[dict[str, str]] | None = errors or None
        default = "Validation failed" if self.errors else "Validation error"
        super().__init__(message or default, **context)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.errors:
            result["errors"] = self.errors
        return result
