from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from car_queries.domain.car import Car, CarValidationError
from car_queries.domain.sample_data import get_sample_cars
from car_queries.ports.car_repository import CarRepository

logger = logging.getLogger(__name__)


class InMemoryCarRepository(CarRepository):
    """
    Canonical contract implementation, used by tests and the report.

    - Validates every car on construction
    - Stores an immutable snapshot (tuple) in insertion order
    - Later changes to the caller's list are not visible
    """

    def __init__(self, cars: Iterable[Car]) -> None:
        snapshot = tuple(cars)

        for index, car in enumerate(snapshot):
            try:
                car.validate()
            except CarValidationError as exc:
                logger.info(
                    "Rejected invalid car",
                    extra={"index": index, "errors": exc.errors},
                )
                raise CarValidationError(errors=exc.errors, index=index) from exc

        self._cars = snapshot
        logger.debug("Loaded cars", extra={"car_count": len(snapshot)})

    @classmethod
    def with_sample_data(cls) -> InMemoryCarRepository:
        return cls(get_sample_cars())

    def list_cars(self) -> Sequence[Car]:
        return self._cars
