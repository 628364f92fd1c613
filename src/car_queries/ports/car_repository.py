from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from car_queries.domain.car import Car


class CarRepository(ABC):
    """
    Port for read-only car data access.

    Contract:
        - list_cars returns cars in a stable, insertion-defined order
        - the returned sequence must be treated as read-only by callers
        - records are validated by the implementation before they are served
    """

    @abstractmethod
    def list_cars(self) -> Sequence[Car]:
        """
        Return every car held by the repository.

        Returns:
            Read-only ordered sequence of validated cars (possibly empty)
        """
        ...
