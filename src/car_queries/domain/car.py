from __future__ import annotations

from dataclasses import dataclass

from car_queries.domain.errors import ValidationError


class CarValidationError(ValidationError):
    """Raised when a car record violates its field constraints."""

    pass


@dataclass(frozen=True, slots=True)
class Car:
    name: str
    brand: str
    is_electric: bool
    cost: int

    def validate(self) -> None:
        """
        Validate the record's fields.

        Raises:
            CarValidationError: If any field has the wrong type or cost is negative
        """
        errors: list[dict[str, str]] = []

        if not isinstance(self.name, str):
            errors.append({"field": "name", "message": "Must be a string", "code": "INVALID_TYPE"})
        if not isinstance(self.brand, str):
            errors.append({"field": "brand", "message": "Must be a string", "code": "INVALID_TYPE"})
        if not isinstance(self.is_electric, bool):
            errors.append(
                {"field": "is_electric", "message": "Must be a boolean", "code": "INVALID_TYPE"}
            )
        # bool is an int subclass; True is not a price
        if not isinstance(self.cost, int) or isinstance(self.cost, bool):
            errors.append({"field": "cost", "message": "Must be an integer", "code": "INVALID_TYPE"})
        elif self.cost < 0:
            errors.append({"field": "cost", "message": "Must be >= 0", "code": "NEGATIVE_COST"})

        if errors:
            raise CarValidationError(errors=errors)
