from pydantic import BaseModel, ConfigDict, Field


class CarDTO(BaseModel):
    name: str
    brand: str
    is_electric: bool
    cost: int


class CarSummaryQueryDTO(BaseModel):
    """Parameters for building a car summary report."""

    brand_order: str = Field(
        default="first_seen",
        description="Brand ordering: first_seen, first_index or sorted",
        examples=["first_seen"],
    )


class CarSummaryReportDTO(BaseModel):
    """JSON-ready summary of every car query over one dataset."""

    car_count: int = Field(description="Number of cars summarized", ge=0)
    electric_cars: list[CarDTO]
    total_cost: int = Field(description="Sum of all car costs", ge=0)
    brands: list[str]
    brand_order: str
    all_electric: bool
    any_electric: bool
    last_non_electric: CarDTO | None = None
    most_expensive: CarDTO | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
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
        }
    )
