"""
Read-only queries over a sequence of cars.

Every function here is pure: it never mutates the sequence it is given or the
cars inside it, and it never raises for a finite input. An empty sequence is a
normal input; "nothing matched" is reported as an empty list or ``None``.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from car_queries.domain.car import Car


class BrandOrder(str, Enum):
    """Ordering strategy for the unique-brand queries."""

    FIRST_SEEN = "first_seen"
    FIRST_INDEX = "first_index"
    SORTED = "sorted"


def only_electric(cars: Sequence[Car]) -> list[Car]:
    return [car for car in cars if car.is_electric]


def total_cost(cars: Sequence[Car]) -> int:
    return sum(car.cost for car in cars)


def unique_brands(cars: Sequence[Car]) -> list[str]:
    """Distinct brands in order of first occurrence."""
    brands: list[str] = []
    for car in cars:
        if car.brand not in brands:
            brands.append(car.brand)
    return brands


def unique_brands_by_first_index(cars: Sequence[Car]) -> list[str]:
    """
    Distinct brands in order of first occurrence.

    Keeps a brand only at the position where it first appears. Same result as
    ``unique_brands``; quadratic in the number of cars.
    """
    brands = [car.brand for car in cars]
    return [brand for index, brand in enumerate(brands) if brands.index(brand) == index]


def unique_brands_sorted(cars: Sequence[Car]) -> list[str]:
    """
    Distinct brands in lexicographic order.

    Use only when input order does not matter: the first-occurrence order is
    discarded.
    """
    return sorted({car.brand for car in cars})


def unique_brands_for(cars: Sequence[Car], order: BrandOrder) -> list[str]:
    if order is BrandOrder.FIRST_INDEX:
        return unique_brands_by_first_index(cars)
    if order is BrandOrder.SORTED:
        return unique_brands_sorted(cars)
    return unique_brands(cars)


def all_electric(cars: Sequence[Car]) -> bool:
    return all(car.is_electric for car in cars)


def any_electric(cars: Sequence[Car]) -> bool:
    return any(car.is_electric for car in cars)


def last_non_electric(cars: Sequence[Car]) -> Car | None:
    """Last car that is not electric, or ``None``. Scans a reversed view; input order is untouched."""
    return next((car for car in reversed(cars) if not car.is_electric), None)


def most_expensive(cars: Sequence[Car]) -> Car | None:
    """
    Car with the highest cost, or ``None`` for an empty sequence.

    Ties go to the earliest car: the current pick is replaced only by a
    strictly greater cost.
    """
    champion: Car | None = None
    for car in cars:
        if champion is None or car.cost > champion.cost:
            champion = car
    return champion
