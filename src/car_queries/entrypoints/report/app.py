"""In-process entrypoint producing the car summary report."""

from __future__ import annotations

import logging

from car_queries.adapters.in_memory_car_repository import InMemoryCarRepository
from car_queries.entrypoints.report.dtos.car_summary import (
    CarSummaryQueryDTO,
    CarSummaryReportDTO,
)
from car_queries.entrypoints.report.mappers.car_summary_mapper import CarSummaryMapper
from car_queries.infra.logging_config import configure_logging
from car_queries.ports.car_repository import CarRepository
from car_queries.use_cases.summarize_cars import SummarizeCars

logger = logging.getLogger(__name__)


def build_summary_report(
    repository: CarRepository | None = None,
    brand_order: str = "first_seen",
) -> CarSummaryReportDTO:
    """Build a summary report following parse → execute → map → return.

    Args:
        repository: Car source; defaults to the fixed sample dataset
        brand_order: first_seen, first_index or sorted

    Returns:
        CarSummaryReportDTO: Serializable report (``model_dump(mode="json")``)

    Raises:
        ValidationError: If brand_order is unknown
        RuntimeError: If CAR_QUERIES_LOG_LEVEL is not a valid level
    """
    configure_logging()

    # 1. Map to domain request
    request = CarSummaryMapper.to_domain_request(CarSummaryQueryDTO(brand_order=brand_order))

    # 2. Execute use case
    if repository is None:
        repository = InMemoryCarRepository.with_sample_data()

    use_case = SummarizeCars(repository)
    result = use_case.execute(request)

    # 3. Map to response
    report = CarSummaryMapper.to_response(result=result, brand_order=request.brand_order)

    logger.info(
        "Built car summary report",
        extra={"car_count": report.car_count, "brand_order": report.brand_order},
    )

    return report
