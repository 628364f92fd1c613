"""Summarize cars use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from car_queries.domain import queries
from car_queries.domain.car import Car
from car_queries.domain.errors import ValidationError
from car_queries.domain.queries import BrandOrder
from car_queries.ports.car_repository import CarRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SummarizeCarsRequest:
    """Request to summarize every car in a repository."""

    brand_order: BrandOrder = BrandOrder.FIRST_SEEN

    def validate(self) -> None:
        """
        Validate request parameters.

        Raises:
            ValidationError: If brand_order is not a BrandOrder member
        """
        if not isinstance(self.brand_order, BrandOrder):
            raise ValidationError(
                errors=[
                    {
                        "field": "brand_order",
                        "message": "Must be one of: "
                        + ", ".join(order.value for order in BrandOrder),
                        "code": "INVALID_BRAND_ORDER",
                    }
                ]
            )


@dataclass(frozen=True, slots=True)
class SummarizeCarsResponse:
    """Results of every car query, computed over the same snapshot."""

    cars: list[Car]
    electric_cars: list[Car]
    total_cost: int
    brands: list[str]
    all_electric: bool
    any_electric: bool
    last_non_electric: Car | None = None
    most_expensive: Car | None = None


class SummarizeCars:
    """
    Use case running the full set of car queries over a repository.

    Responsibilities:
    - Validate the request (brand ordering)
    - Read the repository exactly once
    - Delegate every computation to the pure query functions
    """

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, request: SummarizeCarsRequest) -> SummarizeCarsResponse:
        """
        Execute the summary.

        Args:
            request: Summary parameters

        Returns:
            Response holding each query result; empty repositories yield
            empty lists, a zero total and None for the single-car lookups

        Raises:
            ValidationError: If the request is invalid
        """
        request.validate()

        cars = self._repository.list_cars()

        response = SummarizeCarsResponse(
            cars=list(cars),
            electric_cars=queries.only_electric(cars),
            total_cost=queries.total_cost(cars),
            brands=queries.unique_brands_for(cars, request.brand_order),
            all_electric=queries.all_electric(cars),
            any_electric=queries.any_electric(cars),
            last_non_electric=queries.last_non_electric(cars),
            most_expensive=queries.most_expensive(cars),
        )

        logger.debug(
            "Summarized cars",
            extra={
                "car_count": len(response.cars),
                "electric_count": len(response.electric_cars),
                "brand_count": len(response.brands),
                "brand_order": request.brand_order.value,
            },
        )

        return response
