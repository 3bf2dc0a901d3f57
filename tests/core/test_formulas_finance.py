"""Finance Formulas - tests for the money calculators.

Tests cover:
    - Moonlight index bands, multipliers and the 100 cap
    - Zero denominators return the "N/A" sentinel instead of raising
    - Noodle survival floor division and description bands
    - Breakup, escape-Taipei, car-vs-Uber, housing and food-expense arithmetic
    - Every result carries 3-5 suggestions
"""

import math

from lifeformula.core.calc_result import SENTINEL_VALUE
from lifeformula.core.formulas_finance import (
    breakup_cost,
    car_vs_uber,
    escape_taipei,
    food_alternatives,
    food_expense_shocker,
    housing_index,
    moonlight_index,
    noodle_survival,
)


def test_moonlight_ninety_percent_is_professional(tables):
    result = moonlight_index({"salary": 50000, "expenses": 45000}, tables)
    assert result.value == 90
    assert 0 <= result.value <= 100
    assert result.level == "專業月光族"
    assert result.details["base_index"] == 90
    assert result.details["monthly_balance"] == 5000
    assert len(result.suggestions) == 3


def test_moonlight_city_multiplier_capped_at_100(tables):
    result = moonlight_index(
        {"salary": 50000, "expenses": 45000, "location": "台北市"}, tables,
    )
    assert result.value == 100
    assert result.level == "超級月光族"
    assert result.details["location_multiplier"] == 1.3


def test_moonlight_senior_discount(tables):
    result = moonlight_index({"salary": 50000, "expenses": 40000, "age": 40}, tables)
    assert result.value == 64
    assert result.level == "業餘月光族"


def test_moonlight_saver(tables):
    result = moonlight_index({"salary": 60000, "expenses": 15000}, tables)
    assert result.value == 25
    assert result.level == "理財新手"


def test_moonlight_zero_salary_is_sentinel(tables):
    result = moonlight_index({"salary": 0, "expenses": 1000}, tables)
    assert result.value == SENTINEL_VALUE
    assert result.is_sentinel
    assert result.details["reason"] == "zero_denominator"
    assert result.details["field"] == "salary"


def test_noodle_survival_days(tables):
    result = noodle_survival(
        {"budget": 1000, "noodle_price": 25, "daily_noodles": 3}, tables,
    )
    assert result.value == 13
    assert result.unit == "天"
    assert result.description.startswith("一週泡麵生活")
    assert result.details["total_noodles"] == 39


def test_noodle_survival_month(tables):
    result = noodle_survival(
        {"budget": 3000, "noodle_price": 25, "daily_noodles": 2}, tables,
    )
    assert result.value == 60
    assert "一個月以上" in result.description


def test_noodle_zero_daily_cost_is_sentinel(tables):
    result = noodle_survival(
        {"budget": 1000, "noodle_price": 25, "daily_noodles": 0}, tables,
    )
    assert result.value == SENTINEL_VALUE
    assert result.unit == "天"
    assert result.details["field"] == "daily_cost"
    assert len(result.suggestions) >= 3


def test_breakup_cost_sums_components(tables):
    result = breakup_cost(
        {"relationship_months": 12, "monthly_spending": 5000, "shared_assets": 100000},
        tables,
    )
    assert result.value == 140000
    assert result.details == {
        "time_cost": 60000,
        "asset_loss": 50000,
        "emotional_cost": 30000,
        "relationship_months": 12,
    }
    assert result.description == "分手成本 140,000 元，還在可承受範圍內。"


def test_breakup_cost_expensive(tables):
    result = breakup_cost(
        {"relationship_months": 60, "monthly_spending": 10000, "shared_assets": 0},
        tables,
    )
    assert result.value == 660000
    assert result.description.startswith("哇！")


def test_escape_taipei_comfortable(tables):
    result = escape_taipei(
        {"current_salary": 50000, "target_city": "台中市", "lifestyle_level": "comfortable"},
        tables,
    )
    assert result.value == 12500
    assert result.details["savings_percentage"] == 25
    assert result.description == "搬到台中市可以省下 12,500 元，省錢率 25%，值得考慮！"


def test_escape_taipei_basic_saves_more(tables):
    result = escape_taipei(
        {"current_salary": 50000, "target_city": "台中市", "lifestyle_level": "basic"},
        tables,
    )
    assert result.value == 20000
    assert result.description.startswith("太棒了！")


def test_escape_taipei_unknown_city_uses_default_ratio(tables):
    result = escape_taipei(
        {"current_salary": 100000, "target_city": "其他", "lifestyle_level": "comfortable"},
        tables,
    )
    assert result.value == 30000


def test_escape_taipei_zero_salary_is_sentinel(tables):
    result = escape_taipei(
        {"current_salary": 0, "target_city": "台南市", "lifestyle_level": "basic"},
        tables,
    )
    assert result.value == SENTINEL_VALUE
    assert result.details["field"] == "current_salary"


def test_car_vs_uber_recommends_uber(tables):
    result = car_vs_uber(
        {"car_price": 600000, "monthly_fuel": 3000, "monthly_trips": 20}, tables,
    )
    assert result.value == 17000
    assert result.details["car_cost"] == 21000
    assert result.details["uber_cost"] == 4000
    assert result.details["recommendation"] == "Uber"
    assert "17,000" in result.description


def test_car_vs_uber_roughly_equal(tables):
    result = car_vs_uber(
        {"car_price": 600000, "monthly_fuel": 3000, "monthly_trips": 100}, tables,
    )
    assert result.value == 1000
    assert result.details["recommendation"] == "差不多"


def test_car_vs_uber_car_wins(tables):
    result = car_vs_uber(
        {"car_price": 0, "monthly_fuel": 0, "monthly_trips": 200}, tables,
    )
    assert result.value == 32000
    assert result.details["recommendation"] == "養車"


def test_housing_cramped_taipei_is_capped(tables):
    result = housing_index(
        {"living_space": 10, "rent_price": 25000, "city": "台北市"}, tables,
    )
    assert result.value == 100
    assert result.level == "超級蝸居族"


def test_housing_comfortable(tables):
    result = housing_index(
        {"living_space": 30, "rent_price": 15000, "city": "台中市"}, tables,
    )
    assert result.value == 50
    assert result.level == "居住幸福"
    assert result.details["rent_per_ping"] == 500


def test_housing_zero_space_is_sentinel(tables):
    result = housing_index(
        {"living_space": 0, "rent_price": 15000, "city": "台中市"}, tables,
    )
    assert result.value == SENTINEL_VALUE
    assert result.details["field"] == "living_space"


def test_food_expense_shocker(tables):
    result = food_expense_shocker(
        {"daily_meals": 2, "avg_meal_cost": 150,
         "cooking_frequency": "daily", "monthly_income": 40000},
        tables,
    )
    assert result.value == 50
    assert result.level == "需要注意"
    assert result.details["costs"] == {
        "daily": 300, "weekly": 2100, "monthly": 9000, "yearly": 109500,
    }
    assert result.details["income_percentage"] == 22.5
    assert result.details["savings"]["yearly"] == 76650
    assert result.suggestions[0] == "建議增加在家煮飯的頻率，可以節省不少開銷"
    assert len(result.suggestions) == 4


def test_food_expense_zero_income_is_sentinel(tables):
    result = food_expense_shocker(
        {"daily_meals": 2, "avg_meal_cost": 150,
         "cooking_frequency": "never", "monthly_income": 0},
        tables,
    )
    assert result.value == SENTINEL_VALUE
    assert result.details["field"] == "monthly_income"
    assert result.details["monthly_cost"] == 9000


def test_food_alternatives_capped_at_five():
    assert food_alternatives(109500) == [
        "一年的健身房會籍", "專業攝影器材一套", "高級筆電一台", "名牌包包5個", "新手機一支",
    ]
    assert food_alternatives(10000) == []


def test_no_result_is_ever_non_finite(tables):
    results = [
        moonlight_index({"salary": 0, "expenses": 0}, tables),
        noodle_survival({"budget": 0, "noodle_price": 0, "daily_noodles": 0}, tables),
        housing_index({"living_space": 0, "rent_price": 0, "city": "其他"}, tables),
        food_expense_shocker(
            {"daily_meals": 1, "avg_meal_cost": 0,
             "cooking_frequency": "daily", "monthly_income": 0},
            tables,
        ),
    ]
    for result in results:
        assert not (isinstance(result.value, float) and not math.isfinite(result.value))
        assert 3 <= len(result.suggestions) <= 5
