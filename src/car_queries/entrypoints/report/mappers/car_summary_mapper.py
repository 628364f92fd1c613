from __future__ import annotations

from car_queries.domain.car import Car
from car_queries.domain.errors import ValidationError
from car_queries.domain.queries import BrandOrder
from car_queries.entrypoints.report.dtos.car_summary import (
    CarDTO,
    CarSummaryQueryDTO,
    CarSummaryReportDTO,
)
from car_queries.use_cases.summarize_cars import (
    SummarizeCarsRequest,
    SummarizeCarsResponse,
)


class CarSummaryMapper:
    """Maps between report DTOs and domain models for the car summary."""

    @staticmethod
    def to_domain_request(dto: CarSummaryQueryDTO) -> SummarizeCarsRequest:
        """
        Builds the domain request, parsing the brand ordering.

        Args:
            dto: Report parameters

        Returns:
            SummarizeCarsRequest: Domain request

        Raises:
            ValidationError: If brand_order is not a known ordering
        """
        try:
            brand_order = BrandOrder(dto.brand_order.strip().lower())
        except ValueError:
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

        return SummarizeCarsRequest(brand_order=brand_order)

    @staticmethod
    def to_car_response(car: Car) -> CarDTO:
        return CarDTO(
            name=car.name,
            brand=car.brand,
            is_electric=car.is_electric,
            cost=car.cost,
        )

    @staticmethod
    def to_response(
        result: SummarizeCarsResponse,
        brand_order: BrandOrder,
    ) -> CarSummaryReportDTO:
        """
        Converts the domain summary to the report DTO.

        Args:
            result: Domain summary
            brand_order: Ordering used for the brands (echoed from request)

        Returns:
            CarSummaryReportDTO: Report with optional cars mapped to None when absent
        """
        return CarSummaryReportDTO(
            car_count=len(result.cars),
            electric_cars=[CarSummaryMapper.to_car_response(car) for car in result.electric_cars],
            total_cost=result.total_cost,
            brands=list(result.brands),
            brand_order=brand_order.value,
            all_electric=result.all_electric,
            any_electric=result.any_electric,
            last_non_electric=(
                CarSummaryMapper.to_car_response(result.last_non_electric)
                if result.last_non_electric is not None
                else None
            ),
            most_expensive=(
                CarSummaryMapper.to_car_response(result.most_expensive)
                if result.most_expensive is not None
                else None
            ),
        )
