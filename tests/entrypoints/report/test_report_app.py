"""End-to-end tests for build_summary_report over in-memory data."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from car_queries.adapters.in_memory_car_repository import InMemoryCarRepository
from car_queries.domain.car import Car
from car_queries.domain.errors import ValidationError
from car_queries.entrypoints.report.app import build_summary_report
from car_queries.infra.config import LOG_LEVEL_ENV_VAR


@pytest.fixture(autouse=True)
def package_logger(monkeypatch: pytest.MonkeyPatch) -> Iterator[logging.Logger]:
    """Keep the package logger level from leaking between tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    logger = logging.getLogger("car_queries")
    original_level = logger.level
    yield logger
    logger.setLevel(original_level)


def test_default_report_matches_sample_dataset() -> None:
    report = build_summary_report()

    assert report.model_dump(mode="json") == {
        "car_count": 5,
        "electric_cars": [
            {"name": "Model 3", "brand": "Tesla", "is_electric": True, "cost": 60000},
            {"name": "Model 3", "brand": "Tesla", "is_electric": True, "cost": 30000},
        ],
        "total_cost": 165000,
        "brands": ["Tesla", "Nissan", "Toyota", "Hyundai"],
        "brand_order": "first_seen",
        "all_electric": False,
        "any_electric": True,
        "last_non_electric": {
            "name": "i30",
            "brand": "Hyundai",
            "is_electric": False,
            "cost": 10000,
        },
        "most_expensive": {
            "name": "Model 3",
            "brand": "Tesla",
            "is_electric": True,
            "cost": 60000,
        },
    }


def test_report_with_sorted_brands() -> None:
    report = build_summary_report(brand_order="sorted")

    assert report.brands == ["Hyundai", "Nissan", "Tesla", "Toyota"]
    assert report.brand_order == "sorted"


def test_report_over_custom_repository() -> None:
    repo = InMemoryCarRepository(
        [Car(name="Leaf", brand="Nissan", is_electric=True, cost=25000)]
    )

    report = build_summary_report(repository=repo)

    assert report.car_count == 1
    assert report.all_electric is True
    assert report.last_non_electric is None


def test_report_over_empty_repository() -> None:
    report = build_summary_report(repository=InMemoryCarRepository([]))

    assert report.car_count == 0
    assert report.total_cost == 0
    assert report.brands == []
    assert report.all_electric is True
    assert report.any_electric is False
    assert report.most_expensive is None


def test_report_rejects_unknown_brand_order() -> None:
    with pytest.raises(ValidationError):
        build_summary_report(brand_order="by_price")


def test_report_serializes_to_json() -> None:
    payload = build_summary_report().model_dump_json()

    assert '"total_cost":165000' in payload


# ==============================================================================
# Logging Configuration
# ==============================================================================


def test_report_applies_configured_log_level(
    monkeypatch: pytest.MonkeyPatch, package_logger: logging.Logger
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "DEBUG")

    build_summary_report()

    assert package_logger.level == logging.DEBUG


def test_report_defaults_to_warning_level(package_logger: logging.Logger) -> None:
    build_summary_report()

    assert package_logger.level == logging.WARNING


def test_report_rejects_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "WARN")

    with pytest.raises(RuntimeError, match=LOG_LEVEL_ENV_VAR):
        build_summary_report()
