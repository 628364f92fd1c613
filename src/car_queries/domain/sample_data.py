"""Fixed sample dataset shared by the demos and the test suite."""

from __future__ import annotations

from car_queries.domain.car import Car


def get_sample_cars() -> list[Car]:
    """
    Return the five sample cars, in their fixed order.

    A new list is built on every call so callers never share a container.
    The two Tesla entries differ only in cost.
    """
    return [
        Car(name="Model 3", brand="Tesla", is_electric=True, cost=60000),
        Car(name="350z", brand="Nissan", is_electric=False, cost=20000),
        Car(name="86", brand="Toyota", is_electric=False, cost=45000),
        Car(name="i30", brand="Hyundai", is_electric=False, cost=10000),
        Car(name="Model 3", brand="Tesla", is_electric=True, cost=30000),
    ]
