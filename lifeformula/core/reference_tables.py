"""Reference Tables - every business constant the formulas read, as one immutable value.

Invariants:
    - Formulas read constants ONLY from a ReferenceTables instance, never literals
    - Tables are read-only (MappingProxyType); a corrected table is a new instance
    - Unknown lookup keys fall back to the *_default fields, never raise

Design Decisions:
    - Figures are rough estimates (city rents, brand lifespans), so they are data that can
      be swapped via dataclasses.replace() without touching formula code
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def _frozen(data: dict) -> Mapping:
    return MappingProxyType(data)


@dataclass(frozen=True)
class ReferenceTables:
    # moonlight-calculator
    moonlight_location_multipliers: Mapping[str, float] = field(
        default_factory=lambda: _frozen({"台北市": 1.3, "新北市": 1.1}),
    )
    moonlight_young_age: int = 25
    moonlight_young_multiplier: float = 1.2
    moonlight_senior_age: int = 35
    moonlight_senior_multiplier: float = 0.8

    # housing-index: average monthly rent per ping
    city_rent_per_ping: Mapping[str, int] = field(
        default_factory=lambda: _frozen({
            "台北市": 2500,
            "新北市": 1800,
            "桃園市": 1200,
            "台中市": 1000,
            "台南市": 800,
            "高雄市": 900,
            "基隆市": 1200,
            "新竹市": 1500,
            "嘉義市": 700,
            "宜蘭縣": 900,
        }),
    )
    city_rent_default: int = 1000
    housing_reference_space: float = 25.0   # ping

    # escape-taipei: living cost relative to Taipei
    city_cost_ratio: Mapping[str, float] = field(
        default_factory=lambda: _frozen({
            "台中市": 0.75,
            "台南市": 0.65,
            "高雄市": 0.70,
            "桃園市": 0.85,
            "新竹市": 0.80,
            "嘉義市": 0.60,
            "宜蘭縣": 0.70,
            "花蓮縣": 0.65,
            "台東縣": 0.60,
        }),
    )
    city_cost_ratio_default: float = 0.70
    lifestyle_multipliers: Mapping[str, float] = field(
        default_factory=lambda: _frozen({
            "basic": 0.8, "comfortable": 1.0, "luxury": 1.5,
        }),
    )

    # phone-lifespan: expected lifespan in months
    phone_brand_lifespan_months: Mapping[str, int] = field(
        default_factory=lambda: _frozen({
            "iPhone": 48,
            "Samsung": 42,
            "Google": 36,
            "Xiaomi": 30,
            "Oppo": 30,
            "Vivo": 30,
            "Huawei": 36,
            "OnePlus": 36,
            "其他": 24,
        }),
    )
    phone_brand_default: str = "其他"

    # car-vs-uber (NT$ per month unless noted)
    car_amortization_months: int = 60
    car_monthly_insurance: int = 3000
    car_monthly_maintenance: int = 2000
    car_monthly_parking: int = 3000
    uber_average_trip_cost: int = 200

    # birthday-collision
    taiwan_population: int = 23_000_000
    days_in_year: int = 365
    special_birthdays: Mapping[str, float] = field(
        default_factory=lambda: _frozen({
            "1-1": 1.2,     # 新年
            "2-14": 1.5,    # 情人節
            "10-10": 1.3,   # 國慶日
            "12-25": 1.1,   # 聖誕節
        }),
    )

    # breakup-cost
    breakup_asset_loss_ratio: float = 0.5
    breakup_recovery_months: int = 6

    # lazy-index-test: points per frequency answer
    laziness_exercise_points: Mapping[str, int] = field(
        default_factory=lambda: _frozen({
            "daily": 0, "often": 5, "sometimes": 15, "rarely": 20, "never": 25,
        }),
    )
    laziness_cooking_points: Mapping[str, int] = field(
        default_factory=lambda: _frozen({
            "daily": 0, "often": 8, "sometimes": 15, "rarely": 20, "never": 25,
        }),
    )
    laziness_cleaning_points: Mapping[str, int] = field(
        default_factory=lambda: _frozen({
            "daily": 0, "often": 5, "sometimes": 15, "rarely": 20, "never": 25,
        }),
    )

    # aging-simulator
    baseline_life_expectancy: int = 80

    # food-expense-shocker
    home_cooking_cost_ratio: float = 0.3
    cooking_shock_multipliers: Mapping[str, float] = field(
        default_factory=lambda: _frozen({
            "never": 1.4,
            "rarely": 1.3,
            "monthly": 1.2,
            "weekly": 1.1,
            "daily": 1.0,
        }),
    )


DEFAULT_TABLES = ReferenceTables()
