"""Lifestyle Formulas - tests for phone, birthday and the three quizzes.

Tests cover:
    - Phone lifespan subtracts phone age for every brand and never goes negative
    - Birthday collisions with special-date multipliers
    - Laziness, gaming and aging scores, caps and level bands
    - Suggestions always 3-5 entries
"""

from lifeformula.core.formulas_lifestyle import (
    aging_simulation,
    birthday_collision,
    gaming_addiction,
    laziness_index,
    phone_lifespan,
)


def test_phone_light_usage(tables):
    result = phone_lifespan(
        {"phone_brand": "iPhone", "phone_age_months": 12, "daily_usage_hours": 3},
        tables,
    )
    assert result.value == 1080
    assert result.details["usage_level"] == "輕度使用"
    assert result.details["expected_lifespan_months"] == 48
    assert result.description == "你的 iPhone 還能撐 3.0 年，保養得不錯！"


def test_phone_heavy_usage_known_brand_subtracts_age(tables):
    result = phone_lifespan(
        {"phone_brand": "Samsung", "phone_age_months": 40, "daily_usage_hours": 10},
        tables,
    )
    assert result.value == 42
    assert result.details["usage_level"] == "重度使用"


def test_phone_past_lifespan_is_zero(tables):
    result = phone_lifespan(
        {"phone_brand": "Xiaomi", "phone_age_months": 40, "daily_usage_hours": 2},
        tables,
    )
    assert result.value == 0
    assert result.description.startswith("警告！")


def test_birthday_ordinary_day(tables):
    result = birthday_collision({"birth_month": 5, "birth_day": 20}, tables)
    assert result.value == 63014
    assert result.details["is_special_date"] is False
    assert result.description == "全台灣約有 63,014 人跟你在同一天慶生，你們是生日夥伴！"


def test_birthday_valentines_day(tables):
    result = birthday_collision({"birth_month": 2, "birth_day": 14}, tables)
    assert result.value == 94521
    assert result.details["is_special_date"] is True
    assert result.details["probability"] == 0.41
    assert result.description.startswith("哇！")


def test_birthday_christmas_is_special_but_modest(tables):
    result = birthday_collision({"birth_month": 12, "birth_day": 25}, tables)
    assert result.value == 69315
    assert result.details["is_special_date"] is True
    assert result.description.startswith("全台灣約有")


def test_laziness_hard_worker(tables):
    result = laziness_index(
        {"sleep_hours": 8, "exercise_frequency": "daily", "cooking_frequency": "daily",
         "cleaning_frequency": "daily", "procrastination_level": 1},
        tables,
    )
    assert result.value == 12
    assert result.level == "勤勞蜜蜂"
    assert result.suggestions == [
        "保持這樣的好習慣，你已經是生活的模範了！",
        "睡眠時間適中",
        "每天運動，完全不懶！",
        "每天下廚，勤勞的表現",
    ]


def test_laziness_capped_at_100(tables):
    result = laziness_index(
        {"sleep_hours": 7, "exercise_frequency": "never", "cooking_frequency": "never",
         "cleaning_frequency": "never", "procrastination_level": 10},
        tables,
    )
    assert result.value == 100
    assert result.level == "重度懶人"


def test_laziness_middle_band(tables):
    result = laziness_index(
        {"sleep_hours": 9, "exercise_frequency": "sometimes", "cooking_frequency": "often",
         "cleaning_frequency": "often", "procrastination_level": 3},
        tables,
    )
    # 20 + 15 + 8 + 5 + 6
    assert result.value == 54
    assert result.level == "輕度懶人"


def test_gaming_healthy(tables):
    result = gaming_addiction(
        {"daily_hours": 1, "weekly_spending": 0,
         "social_impact": 0, "work_impact": 0, "sleep_impact": 0},
        tables,
    )
    assert result.value == 5
    assert result.level == "健康玩家"
    assert len(result.suggestions) == 3


def test_gaming_light_risk(tables):
    result = gaming_addiction(
        {"daily_hours": 3, "weekly_spending": 300,
         "social_impact": 4, "work_impact": 2, "sleep_impact": 2},
        tables,
    )
    assert result.value == 37
    assert result.level == "輕度風險"
    assert result.details["yearly_spending"] == 15600
    assert result.suggestions[-1] == "輕微影響社交關係"


def test_gaming_extreme_is_capped(tables):
    result = gaming_addiction(
        {"daily_hours": 8, "weekly_spending": 2000,
         "social_impact": 10, "work_impact": 10, "sleep_impact": 10},
        tables,
    )
    assert result.value == 100
    assert result.level == "極度風險"


def test_aging_healthy_habits_clamped(tables):
    result = aging_simulation(
        {"age": 30, "smoking": "never", "drinking": "never", "exercise": "regular",
         "diet": "healthy", "stress": 2, "sleep": 7.5},
        tables,
    )
    assert result.value == 20
    assert result.level == "非常健康"
    assert result.details["life_expectancy"] == 100
    assert result.details["remaining_years"] == 70
    assert len(result.suggestions) == 3
    assert result.suggestions[-1] == "保持目前的好習慣"


def test_aging_bad_habits_clamped(tables):
    result = aging_simulation(
        {"age": 40, "smoking": "heavy", "drinking": "heavy", "exercise": "never",
         "diet": "unhealthy", "stress": 9, "sleep": 5},
        tables,
    )
    assert result.value == 60
    assert result.level == "警告"
    assert result.details["age_difference"] == 20
    assert result.details["life_expectancy"] == 60
    assert len(result.suggestions) == 5
    assert len(result.details["factors"]) == 6
